import tomllib
from pathlib import Path
from typing import Any

from consistency_linter.aggregator import ConsistencyOptions
from consistency_linter.conventions import DEFAULT_MIXED_THRESHOLD, DEFAULT_SAMPLE_SIZE_PER_FILE
from consistency_linter.exceptions import ConfigurationError
from consistency_linter.provider import DEFAULT_EXCLUDE, DEFAULT_EXTENSIONS
from consistency_linter.whitelists import DEFAULT_WHITELISTS

CONFIG_FILE_NAME = ".consistency-lint.toml"
TOOL_SECTION = "consistency-lint"


class LintConfig:
    """Handles loading and validation of .consistency-lint.toml configuration"""

    def __init__(self, config_path: Path | None = None):
        self.check_naming: bool = True
        self.check_patterns: bool = True
        self.min_severity: str = "info"
        self.extensions: list[str] = list(DEFAULT_EXTENSIONS)
        self.exclude: list[str] = list(DEFAULT_EXCLUDE)
        self.ignore: list[str] = []
        self.max_workers: int | None = None
        self.sample_size_per_file: int = DEFAULT_SAMPLE_SIZE_PER_FILE
        self.mixed_threshold: float = DEFAULT_MIXED_THRESHOLD
        self.common_words: list[str] = []
        self.abbreviations: list[str] = []
        self.source: Path | None = None

        if config_path and config_path.exists():
            self._load_from_file(config_path)

    @classmethod
    def discover(cls, root: Path) -> "LintConfig":
        """Load .consistency-lint.toml or pyproject.toml from root, falling back to defaults."""
        base = root if root.is_dir() else root.parent
        for name in (CONFIG_FILE_NAME, "pyproject.toml"):
            candidate = base / name
            if candidate.is_file():
                config = cls(candidate)
                if config.source is not None:
                    return config
        return cls()

    def _load_from_file(self, path: Path):
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationError(f"Malformed configuration file {path}: {e}") from e
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration file {path}: {e}") from e

        section = data.get("tool", {}).get(TOOL_SECTION)
        if section is None and path.name != "pyproject.toml":
            section = data
        if section is None:
            return
        self.source = path

        self.check_naming = _get(section, "check_naming", bool, self.check_naming)
        self.check_patterns = _get(section, "check_patterns", bool, self.check_patterns)
        self.min_severity = _get(section, "min_severity", str, self.min_severity)
        self.extensions = _get_strings(section, "extensions", self.extensions)
        self.exclude = _get_strings(section, "exclude", self.exclude)
        self.ignore = _get_strings(section, "ignore", self.ignore)
        self.max_workers = _get(section, "max_workers", int, self.max_workers)
        self.sample_size_per_file = _get(section, "sample_size_per_file", int, self.sample_size_per_file)
        self.mixed_threshold = float(
            _get(section, "mixed_threshold", (int, float), self.mixed_threshold)
        )

        whitelist = section.get("whitelist", {})
        if not isinstance(whitelist, dict):
            raise ConfigurationError("'whitelist' must be a table")
        self.common_words = _get_strings(whitelist, "common_words", self.common_words)
        self.abbreviations = _get_strings(whitelist, "abbreviations", self.abbreviations)

    def to_options(self, root_dir: Path | str, **overrides: Any) -> ConsistencyOptions:
        """Build run options; overrides that are None keep the configured value."""
        values = {
            "check_naming": self.check_naming,
            "check_patterns": self.check_patterns,
            "min_severity": self.min_severity,
            "max_workers": self.max_workers,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})

        whitelists = None
        if self.common_words or self.abbreviations:
            whitelists = DEFAULT_WHITELISTS.extend(self.common_words, self.abbreviations)

        return ConsistencyOptions(
            root_dir=str(root_dir),
            extensions=tuple(self.extensions),
            exclude=tuple(self.exclude),
            ignore_rules=tuple(self.ignore),
            whitelists=whitelists,
            sample_size_per_file=self.sample_size_per_file,
            mixed_threshold=self.mixed_threshold,
            **values,
        )


def _get(section: dict, key: str, expected, default):
    if key not in section:
        return default
    value = section[key]
    # bool is an int subclass; keep the two apart
    if isinstance(value, bool) and expected is not bool:
        raise ConfigurationError(f"'{key}' has an invalid value: {value!r}")
    if not isinstance(value, expected):
        raise ConfigurationError(f"'{key}' has an invalid value: {value!r}")
    return value


def _get_strings(section: dict, key: str, default: list[str]) -> list[str]:
    value = section.get(key, default)
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigurationError(f"'{key}' must be a list of strings")
    return list(value)
