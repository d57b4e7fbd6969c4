from dataclasses import dataclass

from lenient_bool.utils.casting import parse


@dataclass(frozen=True, order=True)
class LenientBool:
    """A boolean that can be built from any accepted spelling."""

    value: bool = False

    def __post_init__(self):
        if type(self.value) is not bool:
            raise TypeError(f"LenientBool wraps a bool, got {type(self.value).__name__}; use from_str for text")

    @classmethod
    def from_str(cls, text: str, *, trim: bool = False) -> "LenientBool":
        """Build from text, e.g. ``LenientBool.from_str("Yes")``.

        :param text: Accepted spelling such as ``"y"`` or ``"0"``.
        :param trim: Strip surrounding whitespace before matching.
        :raises LenientBoolError: If ``text`` is not an accepted spelling.
        """
        return cls(parse(text, trim=trim).unwrap())

    def __bool__(self) -> bool:
        return self.value

    def __eq__(self, other):
        if isinstance(other, LenientBool):
            return self.value == other.value
        if isinstance(other, bool):
            return self.value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)
