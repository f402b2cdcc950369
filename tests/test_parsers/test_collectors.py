from optim.parser import collect_positionals, collect_unused, tokenize
from optim.parser.token import TokenKind


def test_collect_positionals_only_unused_bare():
    tokens = tokenize(["prog", "a", "-x", "b", "--", "-c"])
    tokens[1].used = True
    collected = collect_positionals(tokens)
    assert [token.raw for token in collected] == ["b", "-c"]
    assert not any(token.used for token in collected)


def test_collect_unused_all_kinds():
    tokens = tokenize(["prog", None, "a", "-x", "--name=v", "--flag", "--", "b"])
    collected = collect_unused(tokens)
    assert [token.kind for token in collected] == [
        TokenKind.BARE,
        TokenKind.SHORT_CLUSTER,
        TokenKind.LONG_WITH_VALUE,
        TokenKind.LONG_FLAG,
        TokenKind.SEPARATOR,
        TokenKind.BARE,
    ]
    assert [token.restore() for token in collected] == [
        "a",
        "-x",
        "--name=v",
        "--flag",
        "--",
        "b",
    ]
