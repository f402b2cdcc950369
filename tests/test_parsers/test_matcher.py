from optim.exceptions import (
    AlreadyConsumedError,
    DuplicateFlagError,
    MissingArgumentError,
    UnexpectedValueError,
)
from optim.parser import match_arg, match_flag, tokenize


class Recorder:
    def __init__(self):
        self.errors = []

    def __call__(self, error):
        self.errors.append(error)


def values(tokens):
    return [token.text for token in tokens]


def test_match_arg_short_and_long_in_order():
    tokens = tokenize(["prog", "-a", "x", "--alpha=y", "--alpha", "z", "-a", "w"])
    report = Recorder()
    matches = match_arg(tokens, "a", "alpha", "ARG", report)
    assert values(matches) == ["x", "y", "z", "w"]
    assert report.errors == []
    assert all(token.used for token in tokens)


def test_match_arg_cluster_last_letter():
    tokens = tokenize(["prog", "-va", "val"])
    report = Recorder()
    matches = match_arg(tokens, "a", None, "ARG", report)
    assert values(matches) == ["val"]
    cluster = tokens[1]
    assert cluster.flags == ["v"]
    assert cluster.used is False


def test_match_arg_not_last_letter_is_ignored():
    tokens = tokenize(["prog", "-av", "val"])
    report = Recorder()
    assert match_arg(tokens, "a", None, "ARG", report) == []
    assert tokens[1].flags == ["a", "v"]
    assert report.errors == []


def test_match_arg_missing_argument_at_end():
    tokens = tokenize(["prog", "-a"])
    report = Recorder()
    assert match_arg(tokens, "a", None, "ARG", report) == []
    assert isinstance(report.errors[0], MissingArgumentError)
    assert str(report.errors[0]) == "Flag '-a' is missing its argument"


def test_match_arg_missing_argument_before_option():
    tokens = tokenize(["prog", "--alpha", "-b"])
    report = Recorder()
    assert match_arg(tokens, None, "alpha", "ARG", report) == []
    assert str(report.errors[0]) == "Flag '--alpha' is missing its argument"
    assert tokens[1].used is False


def test_match_arg_value_must_be_unused():
    tokens = tokenize(["prog", "-b", "x", "-a"])
    tokens[2].used = True
    report = Recorder()
    assert match_arg(tokens, "b", None, "ARG", report) == []
    assert isinstance(report.errors[0], MissingArgumentError)


def test_match_arg_duplicate_in_cluster():
    tokens = tokenize(["prog", "-aa", "x"])
    report = Recorder()
    assert match_arg(tokens, "a", None, "NUM", report) == []
    assert isinstance(report.errors[0], DuplicateFlagError)
    assert (
        str(report.errors[0]) == "Flag '-a NUM' specified multiple times in same argument"
    )


def test_match_arg_already_consumed():
    tokens = tokenize(["prog", "-ba"])
    report = Recorder()
    match_arg(tokens, "a", None, "ARG", report)
    assert isinstance(report.errors[0], MissingArgumentError)

    report = Recorder()
    match_arg(tokens, "a", None, "ARG", report)
    assert isinstance(report.errors[0], AlreadyConsumedError)
    assert str(report.errors[0]) == "Flag '-a ARG' already consumed"


def test_match_arg_after_separator_is_bare():
    tokens = tokenize(["prog", "--", "-a", "x"])
    report = Recorder()
    assert match_arg(tokens, "a", None, "ARG", report) == []
    assert report.errors == []


def test_match_flag_counts_repeats():
    tokens = tokenize(["prog", "-vv", "-v", "--verbose", "-xv"])
    report = Recorder()
    assert match_flag(tokens, "v", "verbose", report) == 5
    assert tokens[1].used and tokens[2].used and tokens[3].used
    assert tokens[4].flags == ["x"]
    assert tokens[4].used is False


def test_match_flag_long_with_value_is_error():
    tokens = tokenize(["prog", "--verbose=1"])
    report = Recorder()
    assert match_flag(tokens, "v", "verbose", report) == 0
    assert isinstance(report.errors[0], UnexpectedValueError)
    assert str(report.errors[0]) == "Flag '--verbose' does not take an argument"
    assert tokens[1].used is False


def test_match_flag_ignores_bare_tokens():
    tokens = tokenize(["prog", "v", "verbose"])
    assert match_flag(tokens, "v", "verbose", Recorder()) == 0


def test_declarations_never_share_tokens():
    tokens = tokenize(["prog", "-a", "x", "-b", "y", "--alpha=z"])
    report = Recorder()
    first = match_arg(tokens, "a", "alpha", "ARG", report)
    second = match_arg(tokens, "b", "alpha", "ARG", report)
    assert values(first) == ["x", "z"]
    assert values(second) == ["y"]
    assert not set(id(token) for token in first) & set(id(token) for token in second)
