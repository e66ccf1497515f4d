from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, field_validator

FAIL_FORMAT = "format"
FAIL_UNSUPPORTED = "unsupported"
FAIL_MISSING = "missing"


@dataclass(frozen=True)
class GridParts:
    column: str
    row: int
    subgrid: str


@dataclass(frozen=True)
class Solution:
    angle: str
    range: int
    mils: Optional[int]
    too_close: bool
    too_far: bool

    ok = True

    def to_json(self) -> dict:
        return {"angle": self.angle, "range": self.range, "mils": self.mils,
                "tooClose": self.too_close, "tooFar": self.too_far}


@dataclass(frozen=True)
class GridFailure:
    grid: str
    kind: str
    reason: str

    ok = False

    def to_json(self) -> dict:
        return {"grid": self.grid, "kind": self.kind, "reason": self.reason}


class SolveIn(BaseModel):
    origin: str
    target: str

    @field_validator("origin", "target")
    @classmethod
    def _strip(cls, v: str) -> str:
        return v.strip()
