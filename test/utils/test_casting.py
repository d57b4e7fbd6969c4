import pytest

from lenient_bool.configs.parser_config import ParserConfig
from lenient_bool.model.result import Err, InvalidInput, LenientBoolError, Ok
from lenient_bool.utils.casting import FALSY_TOKENS, TOKEN_TABLE, TRUTHY_TOKENS, Parser, parse, to_bool


@pytest.mark.parametrize(
    "text, expected",
    [
        ("TRUE", Ok(True)),
        ("n", Ok(False)),
        ("1", Ok(True)),
        ("0", Ok(False)),
        ("maybe", Err(InvalidInput("maybe"))),
        ("Yes", Ok(True)),
    ],
)
def test_parse_scenarios(text, expected):
    assert parse(text) == expected


def test_parse_truthy_spellings(token_cases):
    for text in token_cases["truthy"]:
        assert parse(text) == Ok(True), text


def test_parse_falsy_spellings(token_cases):
    for text in token_cases["falsy"]:
        assert parse(text) == Ok(False), text


def test_parse_rejects_everything_else(token_cases):
    for text in token_cases["invalid"]:
        result = parse(text)
        assert result.is_err(), text
        # rejected input is echoed back verbatim
        assert result.error.value == text


def test_every_table_token_in_every_case():
    for token in TRUTHY_TOKENS:
        for variant in (token, token.upper(), token.capitalize()):
            assert parse(variant) == Ok(True)
    for token in FALSY_TOKENS:
        for variant in (token, token.upper(), token.capitalize()):
            assert parse(variant) == Ok(False)


def test_token_sets_are_disjoint_and_complete():
    assert TRUTHY_TOKENS.isdisjoint(FALSY_TOKENS)
    assert set(TOKEN_TABLE) == TRUTHY_TOKENS | FALSY_TOKENS
    assert all(TOKEN_TABLE[t] is True for t in TRUTHY_TOKENS)
    assert all(TOKEN_TABLE[t] is False for t in FALSY_TOKENS)


def test_token_table_is_read_only():
    with pytest.raises(TypeError):
        TOKEN_TABLE["on"] = True


def test_parse_is_deterministic():
    results = {parse("Y") for _ in range(5)} | {parse("y")}
    assert results == {Ok(True)}
    assert parse("nah") == parse("nah")


@pytest.mark.parametrize("value", [None, 1, 0, True, b"yes", 1.0])
def test_parse_non_string_returns_err(value):
    assert parse(value) == Err(InvalidInput(value))


def test_parse_trim_option():
    assert parse("1 ").is_err()
    assert parse("1 ", trim=True) == Ok(True)
    assert parse("\t No\n", trim=True) == Ok(False)
    assert parse(" ", trim=True).is_err()
    # internal whitespace is never removed
    assert parse("y es", trim=True).is_err()


def test_error_message_echoes_input():
    result = parse("maybe")
    assert result.error.message == "invalid boolean value: 'maybe'"


def test_to_bool():
    assert to_bool("yes") is True
    assert to_bool("F") is False
    assert to_bool(True) is True
    assert to_bool(False) is False
    assert to_bool(" 0 ", trim=True) is False


def test_to_bool_raises_value_error():
    with pytest.raises(LenientBoolError) as exc_info:
        to_bool("maybe")
    assert isinstance(exc_info.value, ValueError)
    assert exc_info.value.value == "maybe"
    assert exc_info.value.error == InvalidInput("maybe")
    assert str(exc_info.value) == "invalid boolean value: 'maybe'"


def test_to_bool_works_as_argparse_type():
    import argparse

    parser = argparse.ArgumentParser()
    parser.add_argument("--dry-run", type=to_bool, default=False)
    assert parser.parse_args(["--dry-run", "Y"]).dry_run is True
    with pytest.raises(SystemExit):
        parser.parse_args(["--dry-run", "sure"])


def test_parser_uses_config():
    strict = Parser()
    lenient = Parser(ParserConfig(trim=True))
    assert strict.get_config().trim is False
    assert strict.parse(" yes").is_err()
    assert lenient.parse(" yes") == Ok(True)
    assert lenient.to_bool("  n ") is False
    with pytest.raises(LenientBoolError):
        strict.to_bool(" n")


def test_parser_config_validation():
    with pytest.raises(ValueError):
        ParserConfig(trim="yes")
