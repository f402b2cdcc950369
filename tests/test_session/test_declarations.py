import pytest

from optim import FinishStatus, Optim
from optim.exceptions import OptimUsageError


def test_repeated_value_option_keeps_order():
    session = Optim(["prog", "-a", "x", "-a", "y"], "")
    cursor = session.arg("a", None)
    assert session.get_count() == 2
    assert cursor is session.cursor
    assert session.get_string() == "x"
    assert session.get_count() == 1
    assert session.get_string() == "y"
    assert session.get_count() == 0
    assert session.get_string("none") == "none"
    assert session.finish() == FinishStatus.SUCCESS


def test_inline_and_separate_values_are_equivalent():
    first = Optim(["prog", "--name=value"])
    second = Optim(["prog", "--name", "value"])
    assert first.arg(None, "name").get_string() == "value"
    assert second.arg(None, "name").get_string() == "value"
    assert first.finish() == second.finish() == FinishStatus.SUCCESS


@pytest.mark.parametrize("flag_first", [True, False])
def test_cluster_order_independent(flag_first):
    session = Optim(["prog", "-vbca", "val"])
    if flag_first:
        assert session.flag("v", "verbose").count == 1
        assert session.arg("a", "alpha").get_string() == "val"
    else:
        assert session.arg("a", "alpha").get_string() == "val"
        assert session.flag("v", "verbose").count == 1
    assert session.flag("b", None).count == 1
    assert session.flag("c", None).count == 1
    assert session.finish() == FinishStatus.SUCCESS


def test_repeated_flag_in_cluster_counts_each():
    session = Optim(["prog", "-vv"])
    assert session.flag("v", "verbose").count == 2
    assert session.get_count() == 2
    assert session.finish() == FinishStatus.SUCCESS


def test_flag_given_separately_counts_each():
    session = Optim(["prog", "-v", "--verbose", "-v"])
    assert session.flag("v", "verbose").count == 3


def test_missing_value_at_end(capsys):
    session = Optim(["prog", "-a"], "[-a NUM]")
    assert session.arg("a", None, "NUM").count == 0
    assert session.error_message == "Flag '-a' is missing its argument"
    assert session.finish() == FinishStatus.FAILURE
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("Error: Flag '-a' is missing its argument\nUsage: prog [-a NUM]")
    assert "-a NUM" in captured.err


def test_get_long():
    session = Optim(["prog", "-n", "0x10", "--count=12x"])
    assert session.arg("n", None).get_long(0) == 16
    assert session.arg(None, "count").get_long(-1) == -1
    assert session.error_message == "Unable to parse number '12x'"


def test_flag_with_inline_value_is_error():
    session = Optim(["prog", "--verbose=1"])
    assert session.flag("v", "verbose").count == 0
    assert session.error_message == "Flag '--verbose' does not take an argument"
    assert session.finish() == FinishStatus.FAILURE


def test_declaration_without_names_is_recorded():
    session = Optim(["prog"])
    assert session.arg(None, None).count == 0
    assert isinstance(session.last_error, OptimUsageError)
    assert "called without `short` or `long`" in session.error_message


def test_short_name_must_be_one_character():
    session = Optim(["prog", "-ab"])
    assert session.flag("ab", None).count == 0
    assert isinstance(session.last_error, OptimUsageError)


def test_declaration_after_positionals_is_recorded(caplog):
    session = Optim(["prog", "-a", "x"])
    session.positionals()
    with caplog.at_level("WARNING", logger="optim"):
        cursor = session.arg("a", None)
    assert cursor.count == 0
    assert session.error_message == "Internal optim error: `arg` called after `positionals`"
    assert "called after `positionals`" in caplog.text


def test_declaration_after_unused_is_recorded():
    session = Optim(["prog", "-v"])
    session.unused()
    assert session.flag("v", None).count == 0
    assert session.error_message == "Internal optim error: `flag` called after `unused`"


def test_get_count_before_declaration():
    session = Optim(["prog"])
    assert session.get_count() == -1
    assert session.get_string("d") == "d"
    assert session.get_long(7) == 7
    assert isinstance(session.last_error, OptimUsageError)
    assert session.error_message.startswith("Internal optim error: `get_count` called before")


def test_empty_slots_are_ignored():
    session = Optim(["prog", None, "", "x"])
    assert list(session.positionals()) == ["x"]
    assert session.finish() == FinishStatus.SUCCESS


def test_options_usage_section():
    session = Optim(["prog"], "<path>")
    session.usage("Does things\n")
    session.flag("v", "verbose", "Increase verbosity")
    session.arg(None, "delta", "diff", "Delta parameter")
    text = session.usage_text
    assert text.startswith("Usage: prog <path>\n\nDoes things\n\nOptions:\n")
    assert "  -h, --help" in text
    assert "Print this help message" in text
    assert "  -v, --verbose" in text
    assert "      --delta=diff" in text
    assert text.count("Options:") == 1
