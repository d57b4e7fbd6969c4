"""Configuration object for :class:`lenient_bool.utils.casting.Parser`."""


class ParserConfig:
    """Matching policy applied by a :class:`Parser`."""

    def __init__(self, trim: bool = False):
        """Initialise the parser policy.

        :param trim: Strip leading/trailing whitespace before comparing.
            Off by default so the literal token is compared.
        :raises ValueError: If ``trim`` is not a bool.
        """
        if not isinstance(trim, bool):
            raise ValueError(f"Invalid trim flag; expected bool but got {type(trim)}")
        self.trim = trim

    def __repr__(self) -> str:
        return f"ParserConfig(trim={self.trim})"
