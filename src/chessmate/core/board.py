"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator

from chessmate.core.enums import Color, PieceType
from chessmate.core.piece import Piece
from chessmate.core.types import Square, is_valid_square, make_square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 8x8 grid of optional pieces.

    Pure data: lookup, mutation and copying.  Move legality lives in
    :mod:`chessmate.core.geometry` and :mod:`chessmate.core.move_generator`.
    """

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * 64

    @staticmethod
    def _index(sq: Square) -> int:
        if not is_valid_square(sq):
            raise IndexError(f"Square out of range: {sq!r}")
        return sq[0] * 8 + sq[1]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[self._index(sq)]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self._squares[self._index(sq)] = piece

    def get(self, sq: Square) -> Piece | None:
        return self[sq]

    def set(self, sq: Square, piece: Piece | None) -> None:
        self[sq] = piece

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self, color: Color) -> Iterator[tuple[Square, Piece]]:
        """Yield ``(square, piece)`` for every *color* piece, row by row."""
        for idx, piece in enumerate(self._squares):
            if piece is not None and piece.color == color:
                yield make_square(idx // 8, idx % 8), piece

    def find_king(self, color: Color) -> Square | None:
        """Square of *color*'s king, or None if it is not on the board."""
        for sq, piece in self.occupied(color):
            if piece.piece_type == PieceType.KING:
                return sq
        return None

    def piece_count(self) -> int:
        return sum(1 for piece in self._squares if piece is not None)

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        return b

    def clear(self) -> None:
        self._squares = [None] * 64

    def move_piece(self, from_sq: Square, to_sq: Square) -> Piece | None:
        """Move whatever stands on *from_sq* to *to_sq*.

        Returns the piece previously on *to_sq* (the capture), if any.
        """
        captured = self[to_sq]
        self[to_sq] = self[from_sq]
        self[from_sq] = None
        return captured

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for col in range(8):
            b[make_square(1, col)] = Piece(Color.BLACK, PieceType.PAWN)
            b[make_square(6, col)] = Piece(Color.WHITE, PieceType.PAWN)

        for col, pt in enumerate(_BACK_RANK):
            b[make_square(0, col)] = Piece(Color.BLACK, pt)
            b[make_square(7, col)] = Piece(Color.WHITE, pt)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(8):
            cells = []
            for col in range(8):
                p = self[make_square(row, col)]
                cells.append(str(p) if p else ".")
            rows.append(f"{8 - row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
