import pytest

from consistency_linter.engine import NamingEngine
from consistency_linter.models import Severity
from consistency_linter.rules import to_camel_case
from consistency_linter.whitelists import DEFAULT_WHITELISTS


def analyze(code, file_path="src/app.ts", **kwargs):
    return NamingEngine(**kwargs).analyze(code, file_path)


def test_single_letter_variable():
    issues = analyze("const a = 5;")

    assert len(issues) == 1
    assert issues[0].category == "poor-naming"
    assert issues[0].identifier == "a"
    assert issues[0].severity == Severity.MINOR
    assert issues[0].line == 1
    assert issues[0].suggestion == "Use descriptive variable name instead of single letter 'a'"


def test_abbreviation():
    issues = analyze("const usr = getUser();")

    assert len(issues) == 1
    assert issues[0].category == "abbreviation"
    assert issues[0].identifier == "usr"
    assert issues[0].severity == Severity.INFO
    assert issues[0].suggestion == "Consider using full word instead of abbreviation 'usr'"


def test_snake_case_in_typescript():
    issues = analyze("const user_name = 'John';")

    assert len(issues) == 1
    assert issues[0].category == "convention-mix"
    assert "userName" in issues[0].suggestion
    assert issues[0].suggestion == "Use camelCase 'userName' instead of snake_case in TypeScript/JavaScript"


def test_prefixed_boolean_is_clear():
    issues = analyze("const isActive: boolean = true;")
    assert [i for i in issues if i.rule_id == "boolean-prefix"] == []
    assert issues == []


def test_unprefixed_boolean():
    issues = analyze("const active: boolean = true;")

    assert len(issues) == 1
    assert issues[0].category == "unclear"
    assert issues[0].identifier == "active"


def test_function_without_verb():
    issues = analyze("function foo() {}")

    assert len(issues) == 1
    assert issues[0].category == "unclear"
    assert issues[0].identifier == "foo"
    assert issues[0].suggestion == "Function 'foo' should start with an action verb (get, set, create, etc.)"


@pytest.mark.parametrize("code", [
    "for (let j = 0; j < 10; j++) {}",
    "const ids = items.map(q => q.id);",
    "const url = buildUrl();",
    "const maxRetries = 3;",
    "// const a = 1",
])
def test_no_issues(code):
    assert analyze(code) == []


def test_single_letter_suppressed_in_loop_and_translation_lines():
    loop = analyze("for (const p of points) {}")
    translated = analyze("const s = t('greeting');")

    assert [i for i in loop if i.rule_id == "short-identifier"] == []
    assert [i for i in translated if i.rule_id == "short-identifier"] == []


def test_test_files_allow_fixture_letters():
    in_test = analyze("const b = 1;", "src/widget.test.ts")
    in_source = analyze("const b = 1;", "src/widget.ts")

    assert [i for i in in_test if i.rule_id == "short-identifier"] == []
    assert [i.rule_id for i in in_source if i.rule_id == "short-identifier"] == ["short-identifier"]


def test_short_abbreviation_allowed_in_date_context():
    assert analyze("const dt = new Date();") == []

    issues = analyze("const dt = compute();")
    assert [(i.rule_id, i.identifier) for i in issues] == [("abbreviation", "dt")]


def test_custom_abbreviation_whitelist():
    whitelists = DEFAULT_WHITELISTS.extend(abbreviations=["usr"])
    assert analyze("const usr = getUser();", whitelists=whitelists) == []


def test_snake_case_only_checked_in_javascript_family_files():
    assert analyze("const user_name = 'John';", "notes/script.py") == []


def test_snake_case_function():
    issues = analyze("function get_user() {}")

    assert len(issues) == 1
    assert issues[0].rule_id == "snake-case-identifier"
    assert "getUser" in issues[0].suggestion


def test_boolean_parameter():
    issues = analyze("function toggle(visible: boolean) {}")
    assert [(i.rule_id, i.identifier) for i in issues] == [("boolean-prefix", "visible")]


@pytest.mark.parametrize("name", [
    "widgetFactory",
    "onClick",
    "veryLongDescriptiveName",
    "sumPrice",
    "itemList",
    "main",
    "Component",
    "getData",
])
def test_function_verb_exceptions(name):
    assert analyze(f"function {name}() {{}}") == []


def test_function_without_verb_data():
    issues = analyze("function data() {}")
    assert [i.identifier for i in issues] == ["data"]


def test_issues_ordered_by_line_then_rule():
    code = "const a = 1;\nlet b = 1; const item_count = 2;\nfunction foo() {}\n"
    issues = analyze(code)

    assert [(i.line, i.rule_id) for i in issues] == [
        (1, "short-identifier"),
        (2, "short-identifier"),
        (2, "abbreviation"),
        (2, "snake-case-identifier"),
        (3, "function-verb"),
    ]


def test_ignored_rules_do_not_run():
    assert analyze("const a = 5;", ignore=["short-identifier"]) == []


def test_analysis_is_deterministic():
    code = "const a = 1;\nconst usr = 2;\nfunction foo(x_y) {}\n"
    assert analyze(code) == analyze(code)


def test_to_camel_case():
    assert to_camel_case("user_name") == "userName"
    assert to_camel_case("user_name_id") == "userNameId"
    assert to_camel_case("max__value") == "maxValue"


def test_backtick_inside_regex_literal_does_not_hide_later_lines():
    code = "const quoteRe = /`/;\nconst q = 1;\nconst w = 2;\n"
    issues = analyze(code)

    assert [(i.line, i.identifier) for i in issues if i.rule_id == "short-identifier"] == [
        (2, "q"),
        (3, "w"),
    ]


def test_generic_function_without_verb():
    issues = analyze("function data<T>(items: T[]) {}")
    assert [i.identifier for i in issues] == ["data"]


def test_generic_snake_case_function():
    issues = analyze("function get_user<T>(id: T) {}")
    assert [i.rule_id for i in issues] == ["snake-case-identifier"]


@pytest.mark.parametrize(
    "token", sorted(DEFAULT_WHITELISTS.common_words | DEFAULT_WHITELISTS.accepted_abbreviations)
)
def test_whitelisted_tokens_are_not_abbreviations(token):
    issues = analyze(f"const {token}Value = 1;")
    assert [i for i in issues if i.rule_id == "abbreviation"] == []


@pytest.mark.parametrize("letter", list("ijklmnxyz"))
@pytest.mark.parametrize("template,file_path", [
    ("const {} = 1;", "src/app.ts"),
    ("function compute({}) {{}}", "src/app.ts"),
    ("const {} = 1;", "src/app.test.ts"),
])
def test_iterator_letters_are_never_short_identifiers(letter, template, file_path):
    issues = analyze(template.format(letter), file_path)
    assert [i for i in issues if i.rule_id == "short-identifier"] == []


@pytest.mark.parametrize("code", [
    "const ur = currentUser();",
    "const u = session.user;",
    "const au = authToken();",
])
def test_user_auth_lines_allow_short_tokens(code):
    assert [i for i in analyze(code) if i.rule_id == "abbreviation"] == []


@pytest.mark.parametrize("code,token", [
    ("const usr = getUser();", "usr"),
    ("const acc = loadAccount();", "acc"),
])
def test_user_auth_lines_still_report_three_letter_tokens(code, token):
    issues = analyze(code)
    assert [(i.rule_id, i.identifier) for i in issues] == [("abbreviation", token)]


def test_boolean_array_is_not_a_boolean():
    assert analyze("const flags: boolean[] = [];") == []


def test_nullable_boolean_needs_prefix():
    issues = analyze("let done: boolean | null = null;")
    assert [(i.rule_id, i.identifier) for i in issues] == [("boolean-prefix", "done")]


def test_parameters_of_function_types_are_not_declarations():
    assert analyze("function run(cb: (flag: boolean) => void) {}") == []
