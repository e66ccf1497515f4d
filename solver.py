import logging
from typing import Union

from pydantic import ValidationError

from config import GRID_CELL_M
from grid import GridError, resolve_grid, validate_grid
from models import FAIL_FORMAT, FAIL_MISSING, GridFailure, Solution, SolveIn
from range_table import MORTAR_TABLE, RangeTable
from utils import Vec2, bearing_deg, format_bearing, magnitude, round_half_up, sub

log = logging.getLogger(__name__)

SolveResult = Union[Solution, GridFailure]


def solution_from_delta(delta: Vec2, table: RangeTable = MORTAR_TABLE) -> Solution:
    angle = format_bearing(bearing_deg(delta))
    rng = round_half_up(magnitude(delta))
    too_close = table.is_too_close(rng)
    too_far = table.is_too_far(rng)
    mils = None
    if not (too_close or too_far):
        mils = round_half_up(table.lookup(rng))
    return Solution(angle=angle, range=rng, mils=mils, too_close=too_close, too_far=too_far)

def calculate_solution(origin: str, target: str, table: RangeTable = MORTAR_TABLE,
                       cell_size: float = GRID_CELL_M) -> SolveResult:
    for g in (origin, target):
        if not validate_grid(g):
            log.info("rejected grid %r: bad format", g)
            return GridFailure(grid=str(g), kind=FAIL_FORMAT, reason="Неверный формат квадрата")
    try:
        origin_pos = resolve_grid(origin, cell_size)
        target_pos = resolve_grid(target, cell_size)
    except GridError as e:
        log.info("rejected grid %r: %s", e.grid, e.reason)
        return GridFailure(grid=e.grid, kind=e.kind, reason=e.reason)

    sol = solution_from_delta(sub(target_pos, origin_pos), table)
    log.debug("%s -> %s: %s", origin, target, sol)
    return sol

def solve_payload(payload: dict, table: RangeTable = MORTAR_TABLE) -> SolveResult:
    try:
        req = SolveIn.model_validate(payload)
    except ValidationError as e:
        missing = ", ".join(str(err["loc"][0]) for err in e.errors() if err.get("loc"))
        log.info("rejected payload: %s", missing or "not an object")
        return GridFailure(grid="", kind=FAIL_MISSING, reason=f"Не хватает параметров: {missing or 'origin, target'}")
    return calculate_solution(req.origin, req.target, table)
