from consistency_linter.models import Severity
from consistency_linter.patterns import PatternEngine, analyze_patterns


def run(contents):
    return analyze_patterns(list(contents), contents)


def test_mixed_error_handling():
    contents = {
        "src/b.ts": "function load() {\n  return { error: 'missing' };\n}\n",
        "src/a.ts": "try {\n  run();\n} catch (e) {\n  report(e);\n}\n",
    }
    (issue,) = run(contents)

    assert issue.category == "error-handling"
    assert issue.severity == Severity.MAJOR
    assert issue.files == ("src/a.ts", "src/b.ts")
    assert issue.identifier == "try-catch, error-result"
    assert issue.suggestion == "Standardize error handling on try/catch blocks; 1 file(s) use another style"
    assert issue.description.startswith("Mixed error handling styles:")


def test_throw_inside_try_catch_file_is_not_unchecked():
    contents = {
        "a.ts": "try { run(); } catch (e) { throw e; }",
        "b.ts": "try { stop(); } catch (e) {}",
    }
    assert run(contents) == []


def test_unchecked_throw_mixed_with_try_catch():
    contents = {
        "a.ts": "try { run(); } catch (e) {}",
        "b.ts": "if (!ok) { throw new Error('bad'); }",
    }
    (issue,) = run(contents)
    assert issue.identifier == "try-catch, unchecked-throw"


def test_mixed_async_prefers_majority_style():
    contents = {
        "a.ts": "const data = await load();",
        "b.ts": "load().then(render);",
        "c.ts": "const more = await loadMore();",
    }
    (issue,) = run(contents)

    assert issue.category == "async-style"
    assert issue.identifier == "async-await, promise-chains"
    assert "async/await" in issue.suggestion
    assert "1 file(s)" in issue.suggestion


def test_callbacks_are_detected():
    contents = {
        "a.js": "fs.readFile(path, (err, data) => { use(data); });",
        "b.js": "const data = await readFile(path);",
    }
    (issue,) = run(contents)
    assert issue.identifier == "async-await, callbacks"


def test_mixed_import_style():
    contents = {
        "a.ts": "import express from 'express';",
        "b.js": "const express = require('express');",
    }
    (issue,) = run(contents)

    assert issue.category == "import-style"
    assert issue.files == ("a.ts", "b.js")


def test_uniform_codebase_has_no_issues():
    contents = {
        "a.ts": "import { a } from './a';\nexport async function go() { await a(); }",
        "b.ts": "import b from './b';\nexport const c = async () => await b();",
    }
    assert run(contents) == []


def test_strings_and_comments_do_not_count():
    contents = {
        "a.ts": "import x from 'x';",
        "b.ts": "import y from 'y';\nconst hint = \"require('z')\"; // .then(later)",
    }
    assert run(contents) == []


def test_missing_contents_are_skipped():
    issues = PatternEngine().analyze(["a.ts", "b.js"], {"a.ts": "import x from 'x';"})
    assert issues == []


def test_ignored_pattern_rules():
    contents = {
        "a.ts": "import express from 'express';",
        "b.js": "const express = require('express');",
    }
    assert PatternEngine(ignore=["mixed-import-style"]).analyze(list(contents), contents) == []
