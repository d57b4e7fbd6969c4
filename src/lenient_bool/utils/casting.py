"""Strict casting helpers for parsing boolean spellings."""

from types import MappingProxyType
from typing import Any

from lenient_bool.configs.parser_config import ParserConfig
from lenient_bool.model.result import Err, InvalidInput, Ok, ParseResult

TRUTHY_TOKENS = frozenset({"true", "t", "yes", "y", "1"})
FALSY_TOKENS = frozenset({"false", "f", "no", "n", "0"})

if TRUTHY_TOKENS & FALSY_TOKENS:
    raise RuntimeError(f"Overlapping boolean tokens: {sorted(TRUTHY_TOKENS & FALSY_TOKENS)}")

TOKEN_TABLE = MappingProxyType(
    {**{token: True for token in TRUTHY_TOKENS}, **{token: False for token in FALSY_TOKENS}}
)


def _fold(value: str) -> str:
    """Lower-case ASCII input; non-ASCII text is returned untouched and never matches."""
    if not value.isascii():
        return value
    return value.lower()


def parse(value: Any, *, trim: bool = False) -> ParseResult:
    """Resolve ``value`` against the closed token table.

    :param value: Text to interpret. Non-string values are rejected.
    :param trim: Strip leading/trailing whitespace before comparing.
    :return: ``Ok(bool)`` on a match, ``Err(InvalidInput(value))`` otherwise.
    """
    if not isinstance(value, str):
        return Err(InvalidInput(value))

    token = value.strip() if trim else value
    resolved = TOKEN_TABLE.get(_fold(token))
    if resolved is None:
        return Err(InvalidInput(value))
    return Ok(resolved)


def to_bool(value: Any, *, trim: bool = False) -> bool:
    """Parse booleans from strings while rejecting ambiguous values.

    :param value: Value to convert; accepts bools or truthy/falsy strings.
    :param trim: Strip surrounding whitespace from strings before matching.
    :return: Parsed boolean value.
    :raises LenientBoolError: If ``value`` cannot be interpreted as a boolean.
    """
    if isinstance(value, bool):
        return value
    return parse(value, trim=trim).unwrap()


class Parser:
    """Binds :func:`parse` to a :class:`ParserConfig`."""

    def __init__(self, config: ParserConfig = None):
        self._config = config
        if self._config is None:
            self._config = ParserConfig()

    def parse(self, value: Any) -> ParseResult:
        return parse(value, trim=self._config.trim)

    def to_bool(self, value: Any) -> bool:
        return to_bool(value, trim=self._config.trim)

    def get_config(self) -> ParserConfig:
        """Return the parser configuration object."""
        return self._config
