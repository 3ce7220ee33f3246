import logging

import pytest

from gosec.analyzer import Analyzer, Metrics, PackageError, is_generated_file
from gosec.config import Config, GlobalOption
from gosec.issue import Issue, Score


@pytest.fixture
def analyzer():
    return Analyzer(None, False, False, logging.getLogger("gosec-test"))


def make_issue():
    return Issue(severity=Score.MEDIUM, confidence=Score.HIGH, rule_id="G401", what="weak")


def test_parse_errors_empty_list(analyzer):
    analyzer.parse_errors([])
    assert analyzer.report()[2] == {}


def test_parse_errors_with_line_and_column(analyzer):
    analyzer.parse_errors([PackageError("file:1:2", "build error")])
    errors = analyzer.report()[2]
    assert list(errors) == ["file"]
    assert len(errors["file"]) == 1
    assert errors["file"][0].line == 1
    assert errors["file"][0].column == 2
    assert "build error" in errors["file"][0].err


def test_parse_errors_without_line_and_column(analyzer):
    analyzer.parse_errors([PackageError("file", "build error")])
    errors = analyzer.report()[2]
    assert len(errors) == 1
    (error,) = errors["file"]
    assert (error.line, error.column) == (0, 0)
    assert error.err == "build error"


def test_parse_errors_trims_message(analyzer):
    analyzer.parse_errors([PackageError("file:3", "  spaced \n")])
    (error,) = analyzer.report()[2]["file"]
    assert (error.line, error.column, error.err) == (3, 0, "spaced")


def test_parse_errors_bad_line(analyzer):
    with pytest.raises(ValueError, match="parsing line"):
        analyzer.parse_errors([PackageError("file:line", "build error")])


def test_parse_errors_bad_column(analyzer):
    with pytest.raises(ValueError, match="parsing column"):
        analyzer.parse_errors([PackageError("file:1:column", "build error")])


def test_parse_errors_appends_to_same_file(analyzer):
    analyzer.parse_errors(
        [PackageError("file:1:2", "error1"), PackageError("file:3:4", "error2")]
    )
    errors = analyzer.report()[2]
    assert len(errors) == 1
    first, second = errors["file"]
    assert (first.line, first.column, first.err) == (1, 2, "error1")
    assert (second.line, second.column, second.err) == (3, 4, "error2")


def test_set_config(analyzer):
    config = Config()
    config["test"] = "test"
    analyzer.config = config
    assert analyzer.config == config
    assert analyzer.config["test"] == "test"


def test_reset(analyzer):
    analyzer.record_issue(make_issue(), False)
    analyzer.record_file(10)
    analyzer.reset()
    issues, metrics, errors = analyzer.report()
    assert issues == []
    assert metrics == Metrics()
    assert errors == {}


def test_append_error_skips_non_buildable(analyzer):
    analyzer.append_error(
        "test",
        RuntimeError('loading file from package "pkg/test": no buildable Go source files in pkg/test'),
    )
    assert len(analyzer.report()[2]) == 0


def test_append_error_adds_to_existing(analyzer):
    analyzer.parse_errors([PackageError("file:1:2", "build error")])
    analyzer.append_error("file", RuntimeError("file build error"))
    errors = analyzer.report()[2]
    assert len(errors) == 1
    assert len(errors["file"]) == 2
    assert errors["file"][1].err == "file build error"
    assert (errors["file"][1].line, errors["file"][1].column) == (0, 0)


def test_finish_sorts_errors(analyzer):
    analyzer.parse_errors([PackageError("f:5:1", "b"), PackageError("f:2:7", "a")])
    analyzer.finish()
    assert [e.err for e in analyzer.report()[2]["f"]] == ["a", "b"]


def test_nosec_without_rules_ignores_everything(analyzer):
    assert analyzer.ignored_rules(["#nosec\n"]) == ([], True)
    assert analyzer.stats.num_nosec == 1


def test_nosec_for_specific_rule(analyzer):
    assert analyzer.ignored_rules(["#nosec G401\n"]) == (["G401"], False)


def test_nosec_for_multiple_rules(analyzer):
    assert analyzer.ignored_rules(["#nosec G301 G401"]) == (["G301", "G401"], False)


def test_no_nosec_tag(analyzer):
    assert analyzer.ignored_rules(["just a comment"]) == ([], False)
    assert analyzer.stats.num_nosec == 0


def test_alternative_tag_and_default_tag():
    config = Config()
    config.set_global(GlobalOption.NOSEC_ALTERNATIVE, "#falsePositive")
    custom = Analyzer(config, False, False, None)
    assert custom.ignored_rules(["#falsePositive"]) == ([], True)
    assert custom.ignored_rules(["#nosec"]) == ([], True)
    assert custom.stats.num_nosec == 2


def test_nosec_overridden_reports_issues():
    config = Config()
    config.set_global(GlobalOption.NOSEC, "true")
    custom = Analyzer(config, False, False, None)
    assert custom.ignored_rules(["#nosec"]) == ([], False)
    assert custom.record_issue(make_issue(), True) is True
    assert len(custom.report()[0]) == 1


def test_ignored_issue_is_dropped(analyzer):
    assert analyzer.record_issue(make_issue(), True) is False
    issues, metrics, _ = analyzer.report()
    assert issues == []
    assert metrics.num_found == 1


def test_issue_recorded_and_counted(analyzer):
    issue = make_issue()
    assert analyzer.record_issue(issue, False) is True
    issues, metrics, _ = analyzer.report()
    assert issues == [issue]
    assert metrics.num_found == 1
    assert issue.nosec is False


def test_show_ignored_marks_and_does_not_count():
    config = Config()
    config.set_global(GlobalOption.SHOW_IGNORED, "true")
    custom = Analyzer(config, False, False, None)
    issue = make_issue()
    assert custom.record_issue(issue, True) is True
    assert issue.nosec is True
    assert custom.report()[1].num_found == 0


def test_record_file_counts_files_and_lines(analyzer):
    analyzer.record_file(4)
    analyzer.record_file(6)
    metrics = analyzer.report()[1]
    assert metrics.num_files == 2
    assert metrics.num_lines == 10
    assert metrics.to_dict() == {"files": 2, "lines": 10, "nosec": 0, "found": 0}


def test_is_generated_file():
    assert is_generated_file(["// Code generated some-generator DO NOT EDIT."]) is True
    assert is_generated_file(["// Code generated by hand"]) is False
    assert is_generated_file(["x // Code generated a DO NOT EDIT."]) is False
    assert is_generated_file([]) is False