import logging

import pytest

from consistency_linter.engine import NamingEngine, analyze_files, analyze_naming
from consistency_linter.exceptions import ContentRetrievalError
from consistency_linter.provider import FileContentProvider


class DictProvider:
    """In-memory content provider"""

    def __init__(self, files):
        self.files = files

    def read(self, path):
        if path not in self.files:
            raise ContentRetrievalError(path, "not found")
        return self.files[path]


def test_file_provider_reads_text(tmp_path):
    path = tmp_path / "a.ts"
    path.write_text("const a = 1;")
    assert FileContentProvider().read(str(path)) == "const a = 1;"


def test_file_provider_missing_file(tmp_path):
    missing = str(tmp_path / "missing.ts")
    with pytest.raises(ContentRetrievalError) as exc_info:
        FileContentProvider().read(missing)
    assert exc_info.value.path == missing


def test_file_provider_undecodable_file(tmp_path):
    path = tmp_path / "bad.ts"
    path.write_bytes(b"\xff\xfe\xfa")
    with pytest.raises(ContentRetrievalError):
        FileContentProvider().read(str(path))


def test_analyze_naming_keeps_caller_order():
    files = {f"src/f{n}.ts": f"const a = {n};\nfunction foo{n}() {{}}\n" for n in range(12)}
    order = sorted(files, reverse=True)

    issues = analyze_naming(order, provider=DictProvider(files), max_workers=4)

    assert [i.file_path for i in issues] == [f for f in order for _ in range(2)]
    assert [i.line for i in issues] == [1, 2] * len(order)


def test_analyze_naming_skips_unreadable_files(caplog):
    provider = DictProvider({"ok.ts": "const a = 1;"})

    with caplog.at_level(logging.WARNING):
        issues = analyze_naming(["missing.ts", "ok.ts"], provider=provider)

    assert [i.file_path for i in issues] == ["ok.ts"]
    assert "missing.ts" in caplog.text


def test_analyze_naming_reads_from_disk(tmp_path):
    path = tmp_path / "app.ts"
    path.write_text("const x = 1;\nconst a = 2;\n")

    issues = analyze_naming([str(path)])

    assert [(i.line, i.identifier) for i in issues] == [(2, "a")]


def test_analyze_files_records_failures():
    provider = DictProvider({"ok.ts": "const a = 1;"})
    results = analyze_files(["ok.ts", "gone.ts"], provider, NamingEngine())

    assert results[0].content == "const a = 1;"
    assert results[0].failure is None
    assert results[1].content is None
    assert results[1].failure.file_path == "gone.ts"
    assert results[1].failure.message == "not found"


def test_analyze_files_without_engine_only_retrieves():
    provider = DictProvider({"ok.ts": "const a = 1;"})
    (result,) = analyze_files(["ok.ts"], provider)

    assert result.content == "const a = 1;"
    assert result.issues == []


def test_engine_is_pure():
    engine = NamingEngine()
    first = engine.analyze("const a = 1;", "a.ts")
    second = engine.analyze("const a = 1;", "a.ts")
    assert first == second
    assert engine.analyze("", "empty.ts") == []


class DeniedProvider(DictProvider):
    """Provider that lets a plain OSError escape for one path"""

    def read(self, path):
        if path == "bad.ts":
            raise PermissionError(13, "Permission denied", path)
        return super().read(path)


def test_analyze_files_survives_plain_os_errors(caplog):
    provider = DeniedProvider({"good.ts": "const a = 1;"})

    with caplog.at_level(logging.WARNING):
        bad, good = analyze_files(["bad.ts", "good.ts"], provider, NamingEngine(), max_workers=2)

    assert bad.failure.file_path == "bad.ts"
    assert "Permission denied" in bad.failure.message
    assert bad.issues == []
    assert good.failure is None
    assert [i.identifier for i in good.issues] == ["a"]
    assert "bad.ts" in caplog.text
