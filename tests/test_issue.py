import pytest

from gosec import cwe
from gosec.errors import Error
from gosec.issue import (
    SNIPPET_OFFSET,
    Issue,
    MetaData,
    ReportInfo,
    Score,
    code_snippet,
    get_cwe_by_rule,
    new_issue,
)


@pytest.mark.parametrize(
    "score, text",
    [(Score.HIGH, "HIGH"), (Score.MEDIUM, "MEDIUM"), (Score.LOW, "LOW")],
)
def test_score_string(score, text):
    assert str(score) == text


def test_score_ordering_names_extremes():
    issues = [
        Issue(severity=Score.MEDIUM, rule_id="G101"),
        Issue(severity=Score.HIGH, rule_id="G102"),
        Issue(severity=Score.LOW, rule_id="G103"),
    ]
    highest = max(issues, key=lambda issue: issue.severity)
    lowest = min(issues, key=lambda issue: issue.severity)
    assert highest.to_dict()["severity"] == "HIGH"
    assert lowest.to_dict()["severity"] == "LOW"
    ordered = sorted(issues, key=lambda issue: issue.severity, reverse=True)
    assert [issue.to_dict()["severity"] for issue in ordered] == ["HIGH", "MEDIUM", "LOW"]


def test_cwe_by_rule_known():
    weakness = get_cwe_by_rule("G101")
    assert weakness is cwe.get("798")
    assert weakness.sprint_id() == "CWE-798"


@pytest.mark.parametrize(
    "rule_id, cwe_id",
    [("G108", "200"), ("G307", "703"), ("G306", "276"), ("G503", "327"), ("G505", "327"), ("G601", "118")],
)
def test_cwe_by_rule_mapping(rule_id, cwe_id):
    assert get_cwe_by_rule(rule_id).id == cwe_id


def test_cwe_by_rule_unknown():
    assert get_cwe_by_rule("G999") is None


def test_file_location():
    issue = Issue(file="/src/project/test.go", line="7")
    assert issue.file_location() == "/src/project/test.go:7"


def test_issue_to_dict():
    issue = Issue(
        severity=Score.HIGH,
        confidence=Score.MEDIUM,
        rule_id="G401",
        what="weak",
        file="a.go",
        code="1: x",
        line="1",
        col="2",
        cwe=get_cwe_by_rule("G401"),
    )
    data = issue.to_dict()
    assert data["severity"] == "HIGH"
    assert data["confidence"] == "MEDIUM"
    assert data["details"] == "weak"
    assert data["column"] == "2"
    assert data["cwe"] == cwe.get("326").to_json()
    assert data["nosec"] is False


def test_issue_to_dict_without_cwe():
    assert Issue(rule_id="G999").to_dict()["cwe"] is None


def test_metadata_fields():
    meta = MetaData(id="G101", severity=Score.HIGH, confidence=Score.LOW, what="creds")
    assert (meta.id, meta.severity, meta.confidence, meta.what) == (
        "G101",
        Score.HIGH,
        Score.LOW,
        "creds",
    )


def test_code_snippet_selects_range():
    lines = ["alpha\n", "beta\n", "gamma\n", "delta\n"]
    assert code_snippet(lines, 2, 3) == "2: beta\n3: gamma\n"


def test_code_snippet_strips_carriage_return():
    snippet = code_snippet(["one\r\n", "two\r\n"], 1, 2)
    assert "\r" not in snippet
    assert snippet.count("\n") == 2


def test_code_snippet_past_end_of_file():
    lines = ["first\n", "second\n"]
    assert code_snippet(lines, 1, 10) == code_snippet(lines, 1, 2)


def test_new_issue_reads_snippet(tmp_path):
    source = tmp_path / "main.go"
    source.write_text("package main\nfunc main() {\n\tx()\n}\n", encoding="utf-8")
    issue = new_issue(str(source), 3, 3, 2, "G104", "unhandled", Score.LOW, Score.HIGH)
    assert issue.line == "3"
    assert issue.col == "2"
    assert issue.rule_id == "G104"
    assert issue.what == "unhandled"
    assert issue.file == str(source)
    with open(source, encoding="utf-8") as handle:
        expected = code_snippet(handle, 3 - SNIPPET_OFFSET, 3 + SNIPPET_OFFSET)
    assert issue.code == expected
    assert issue.cwe is get_cwe_by_rule("G104")


def test_new_issue_line_range(tmp_path):
    source = tmp_path / "x.go"
    source.write_text("a\nb\nc\nd\ne\n", encoding="utf-8")
    issue = new_issue(str(source), 2, 4, 1, "G101", "d", Score.HIGH, Score.HIGH)
    assert issue.line == "2-4"
    assert issue.code.startswith("1: a\n")


def test_new_issue_first_line_snippet_starts_at_one(tmp_path):
    source = tmp_path / "y.go"
    source.write_text("a\nb\nc\n", encoding="utf-8")
    issue = new_issue(str(source), 1, 1, 1, "G101", "d", Score.HIGH, Score.HIGH)
    assert issue.code.startswith("1: a\n")


def test_new_issue_missing_file(tmp_path):
    issue = new_issue(str(tmp_path / "missing.go"), 1, 1, 1, "G101", "d", Score.LOW, Score.LOW)
    assert issue.code == ""


def test_report_info_with_version():
    issues = [Issue(rule_id="G101")]
    errors = {"f.go": [Error(1, 2, "boom")]}
    report = ReportInfo(issues, None, errors)
    returned = report.with_version("dev")
    assert returned is report
    assert report.gosec_version == "dev"
    assert report.issues == issues
    assert report.errors == errors