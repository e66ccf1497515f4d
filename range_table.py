import logging
from typing import Mapping, Optional

import numpy as np

from config import MORTAR_RANGE_TABLE

log = logging.getLogger(__name__)


def linear_interp(x: float, x1: float, y1: float, x2: float, y2: float) -> float:
    m = (y2 - y1) / (x2 - x1)
    b = y2 - m * x2
    return m * x + b


class RangeTable:
    def __init__(self, table: Mapping[float, float]):
        if len(table) < 2:
            raise ValueError("Таблица стрельбы должна содержать хотя бы две точки.")
        keys = np.array([float(k) for k in table.keys()], dtype=np.float64)
        if np.unique(keys).size != keys.size:
            raise ValueError("Повторяющиеся дальности в таблице стрельбы.")
        order = np.argsort(keys)
        self.range_m = keys[order]
        self.elev_mil = np.array([float(v) for v in table.values()], dtype=np.float64)[order]

    @property
    def min_range(self) -> float:
        return float(self.range_m[0])

    @property
    def max_range(self) -> float:
        return float(self.range_m[-1])

    def is_too_close(self, range_m: float) -> bool:
        return range_m < self.min_range

    def is_too_far(self, range_m: float) -> bool:
        return range_m > self.max_range

    def lookup(self, range_m: float) -> Optional[float]:
        """Elevation for a range, or None when the range needs extrapolation.

        A range that sits on a table row returns that row as is. Otherwise the
        closest rows strictly below and above are joined by a straight line.
        """
        r = float(range_m)
        i = int(np.searchsorted(self.range_m, r, side="left"))
        if i < self.range_m.size and self.range_m[i] == r:
            return float(self.elev_mil[i])
        lo = i - 1
        hi = int(np.searchsorted(self.range_m, r, side="right"))
        if lo < 0 or hi >= self.range_m.size:
            log.debug("range %.1f outside table %.0f..%.0f", r, self.min_range, self.max_range)
            return None
        return linear_interp(r, float(self.range_m[lo]), float(self.elev_mil[lo]),
                             float(self.range_m[hi]), float(self.elev_mil[hi]))


MORTAR_TABLE = RangeTable(MORTAR_RANGE_TABLE)
