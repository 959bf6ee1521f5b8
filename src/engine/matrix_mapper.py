# engine/matrix_mapper.py
"""
MatrixMapper
============
Maps logical 5x5 addresses to the board's physical LED order.

Handles:
- row/column <-> logical index (row-major, row 0 = top)
- vertical flip (the board's row 0 is the bottom row)
- serpentine indexing of the raw WS2812 chain

All effect computation happens in logical space; the flip is applied only
when a buffer is serialized for the wire.
"""

from __future__ import annotations
from typing import List, Tuple, TypeVar

from models.color import MATRIX_CELLS, MATRIX_SIZE

T = TypeVar("T")


def _check_index(index: int) -> None:
    if not 0 <= index < MATRIX_CELLS:
        raise IndexError(f"Matrix index out of range: {index}")


def index_of(row: int, col: int) -> int:
    """Logical index of (row, col)"""
    if not (0 <= row < MATRIX_SIZE and 0 <= col < MATRIX_SIZE):
        raise IndexError(f"Matrix position out of range: ({row}, {col})")
    return row * MATRIX_SIZE + col


def row_col(index: int) -> Tuple[int, int]:
    """(row, col) of a logical index"""
    _check_index(index)
    return divmod(index, MATRIX_SIZE)


def flip_index(index: int) -> int:
    """
    Vertical flip: logical row r -> physical row 4 - r, same column.

    An involution: flip_index(flip_index(i)) == i for every i in 0..24.
    """
    row, col = row_col(index)
    return (MATRIX_SIZE - 1 - row) * MATRIX_SIZE + col


def to_wire_order(buffer: List[T]) -> List[T]:
    """Reorder a logical buffer into physical order"""
    if len(buffer) != MATRIX_CELLS:
        raise ValueError(f"Expected {MATRIX_CELLS} cells, got {len(buffer)}")

    wire: List[T] = [None] * MATRIX_CELLS  # type: ignore[list-item]
    for logical, value in enumerate(buffer):
        wire[flip_index(logical)] = value
    return wire


def xy_to_serpentine(x: int, y: int) -> int:
    """
    Index on a serpentine-wired chain: even rows run left->right,
    odd rows right->left.
    """
    if not (0 <= x < MATRIX_SIZE and 0 <= y < MATRIX_SIZE):
        raise IndexError(f"Matrix position out of range: ({x}, {y})")
    if y % 2 == 0:
        return y * MATRIX_SIZE + x
    return y * MATRIX_SIZE + (MATRIX_SIZE - 1 - x)
