"""Lenient but closed-vocabulary string to boolean conversion."""

from lenient_bool.configs.env_config import Env, env_flag
from lenient_bool.configs.parser_config import ParserConfig
from lenient_bool.model.lenient_bool import LenientBool
from lenient_bool.model.result import Err, InvalidInput, LenientBoolError, Ok, ParseResult
from lenient_bool.utils.casting import FALSY_TOKENS, TOKEN_TABLE, TRUTHY_TOKENS, Parser, parse, to_bool

__all__ = [
    "Env",
    "Err",
    "FALSY_TOKENS",
    "InvalidInput",
    "LenientBool",
    "LenientBoolError",
    "Ok",
    "ParseResult",
    "Parser",
    "ParserConfig",
    "TOKEN_TABLE",
    "TRUTHY_TOKENS",
    "env_flag",
    "parse",
    "to_bool",
]
