from enum import IntEnum


class Symbol(IntEnum):
    """Cell content and player marker. Stored as its integer value."""

    NONE = 0
    X = 1
    O = 2

    def opposite(self) -> "Symbol":
        """Return the other player's symbol. NONE has no opposite."""
        if self == Symbol.X:
            return Symbol.O
        if self == Symbol.O:
            return Symbol.X
        return Symbol.NONE

    def to_char(self) -> str:
        if self == Symbol.NONE:
            return " "
        return self.name
