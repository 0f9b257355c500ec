"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessmate.core.types import Square, parse_square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """A (from, to) pair.

    Only meaningful relative to a board snapshot and a mover color.
    """

    from_sq: Square
    to_sq: Square

    def __str__(self) -> str:
        return f"{square_name(self.from_sq)}{square_name(self.to_sq)}"

    @classmethod
    def from_uci(cls, text: str) -> Move:
        if len(text) != 4:
            raise ValueError(f"Invalid move text: {text!r}")
        return cls(parse_square(text[:2]), parse_square(text[2:]))
