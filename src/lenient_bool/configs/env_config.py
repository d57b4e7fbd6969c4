import os
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

from lenient_bool.model.result import LenientBoolError
from lenient_bool.utils.casting import parse
from lenient_bool.utils.logger.logger import Logger


class Env:
    """Loads ``.env`` files into the process environment once."""

    _loaded = False

    @classmethod
    def load(cls, dotenv_path: Optional[str] = None, override: bool = False) -> bool:
        """Load ``.env`` values; later calls are no-ops unless ``dotenv_path`` is given.

        Without ``dotenv_path`` the file is searched for from the working
        directory upwards.

        :param dotenv_path: Explicit file to load instead of the discovered ``.env``.
        :param override: Whether file values replace variables already set.
        :return: Whether a file was read on this call.
        """
        if cls._loaded and dotenv_path is None:
            return False
        if dotenv_path is None:
            dotenv_path = find_dotenv(usecwd=True)
        found = load_dotenv(dotenv_path=dotenv_path, override=override)
        cls._loaded = True
        return found

    @classmethod
    def reset(cls) -> None:
        cls._loaded = False


def env_flag(
    name: str,
    default: bool = False,
    *,
    environ: Optional[Mapping[str, str]] = None,
    trim: bool = True,
    logger: Optional[Logger] = None,
) -> bool:
    """Read a boolean flag from the environment.

    An unset or empty variable yields ``default``. Any other value must be an
    accepted boolean spelling.

    :param name: Environment variable name.
    :param default: Value used when the variable is unset or empty.
    :param environ: Mapping to read instead of ``os.environ``; skips ``.env`` loading.
    :param trim: Strip surrounding whitespace before matching. Whitespace-only
        values count as unset either way.
    :param logger: Optional logger for lookup diagnostics.
    :return: Parsed flag value.
    :raises LenientBoolError: If the variable holds an unrecognised value.
    """
    if environ is None:
        Env.load()
        environ = os.environ

    raw = environ.get(name)
    if raw is None or raw.strip() == "":
        if logger is not None:
            logger.debug(f"{name} not set; using default {default}")
        return default

    result = parse(raw, trim=trim)
    if result.is_err():
        if logger is not None:
            logger.error(f"{name}: {result.error.message}")
        raise LenientBoolError(result.error, context=name)

    if logger is not None:
        logger.debug(f"{name}={result.value}")
    return result.value
