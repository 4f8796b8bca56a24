"""File access: the content provider and source-file discovery."""

import fnmatch
import logging
from pathlib import Path
from typing import Iterable, Protocol

from .exceptions import ConfigurationError, ContentRetrievalError

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS = (".ts", ".tsx", ".js", ".jsx", ".mjs", ".cjs")
DEFAULT_EXCLUDE = (
    "**/node_modules/**",
    "**/dist/**",
    "**/build/**",
    "**/coverage/**",
    "**/.git/**",
    "**/*.d.ts",
    "**/*.min.js",
)


class ContentProvider(Protocol):
    """Protocol for anything that can return a file's full text"""

    def read(self, path: str) -> str: ...


class FileContentProvider:
    """Reads files from disk as UTF-8; no retries, no caching"""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def read(self, path: str) -> str:
        try:
            return Path(path).read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise ContentRetrievalError(str(path), str(e)) from e


def _is_excluded(relative: str, patterns: Iterable[str]) -> bool:
    for pattern in patterns:
        if fnmatch.fnmatch(relative, pattern):
            return True
        # '**/x/**' should also match 'x/...' at the root
        if pattern.startswith("**/") and fnmatch.fnmatch(relative, pattern[3:]):
            return True
    return False


def find_source_files(
    root: str | Path,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    exclude: Iterable[str] = DEFAULT_EXCLUDE,
) -> list[str]:
    """Find all files with the given extensions under root, sorted, minus excluded globs."""
    root_path = Path(root)
    if not root_path.exists():
        raise ConfigurationError(f"Root directory '{root}' does not exist")
    if root_path.is_file():
        return [str(root_path)]

    suffixes = tuple(ext if ext.startswith(".") else f".{ext}" for ext in extensions)
    patterns = tuple(exclude)
    files = []
    for path in root_path.rglob("*"):
        if not path.is_file() or not path.name.endswith(suffixes):
            continue
        relative = path.relative_to(root_path).as_posix()
        if _is_excluded(relative, patterns):
            continue
        files.append(str(path))

    files.sort()
    logger.debug("Found %d source files under %s", len(files), root_path)
    return files
