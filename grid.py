import logging
import re

from config import COLUMN_LETTERS, GRID_CELL_M, KEYPAD_OFFSETS, MAX_GRID_INDEX, SUBGRID_DIVISOR
from models import FAIL_FORMAT, FAIL_UNSUPPORTED, GridParts
from utils import Vec2, add, scale

log = logging.getLogger(__name__)

GRID_RE = re.compile(r"^[A-Za-z][0-9][0-9]?(-[0-9]*)?$")


class GridError(ValueError):
    def __init__(self, grid: str, kind: str, reason: str):
        super().__init__(f"{grid!r}: {reason}")
        self.grid = grid
        self.kind = kind
        self.reason = reason


def validate_grid(text: str) -> bool:
    return isinstance(text, str) and GRID_RE.fullmatch(text) is not None

def parse_grid(text: str) -> GridParts:
    if not validate_grid(text):
        raise GridError(text, FAIL_FORMAT, "Неверный формат квадрата")
    head, _, subgrid = text.partition("-")
    return GridParts(column=head[0].lower(), row=int(head[1:]), subgrid=subgrid)

def column_index(letter: str) -> int:
    idx = COLUMN_LETTERS.find(letter.lower())
    if idx < 0 or idx >= MAX_GRID_INDEX:
        raise GridError(letter, FAIL_UNSUPPORTED, f"Нет столбца {letter.upper()}")
    return idx + 1

def row_index(row: int) -> int:
    if not 1 <= row <= MAX_GRID_INDEX:
        raise GridError(str(row), FAIL_UNSUPPORTED, f"Строка {row} вне карты (1-{MAX_GRID_INDEX})")
    return row

def keypad_offset(digit: str) -> Vec2:
    off = KEYPAD_OFFSETS.get(int(digit))
    if off is None:
        raise GridError(digit, FAIL_UNSUPPORTED, f"Цифра {digit} не входит в раскладку 1-9")
    return Vec2(float(off[0]), float(off[1]))

def resolve_grid(text: str, cell_size: float = GRID_CELL_M) -> Vec2:
    """Map a grid reference to meters from the map corner.

    Starts at the middle of square A1, steps to the named square, then walks
    each keypad digit into a square three times smaller. Y is returned
    negated so that north is +y.
    """
    parts = parse_grid(text)
    try:
        pos = Vec2(cell_size * 0.5, cell_size * 0.5)
        pos = add(pos, Vec2((column_index(parts.column) - 1) * cell_size,
                            (row_index(parts.row) - 1) * cell_size))
        size = cell_size
        for ch in parts.subgrid:
            size = size / SUBGRID_DIVISOR
            pos = add(pos, scale(keypad_offset(ch), size))
    except GridError as e:
        raise GridError(text, e.kind, e.reason) from e
    pos = Vec2(pos.x, -pos.y)
    log.debug("grid %s -> (%.3f, %.3f)", text, pos.x, pos.y)
    return pos
