import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vec2:
    x: float
    y: float


def add(a: Vec2, b: Vec2) -> Vec2:
    return Vec2(a.x + b.x, a.y + b.y)

def scale(v: Vec2, k: float) -> Vec2:
    return Vec2(v.x * k, v.y * k)

def sub(a: Vec2, b: Vec2) -> Vec2:
    return add(a, scale(b, -1.0))

def magnitude(v: Vec2) -> float:
    return math.sqrt(v.x*v.x + v.y*v.y)

def bearing_deg(v: Vec2) -> float:
    # x is east and goes first, so the angle runs clockwise from north
    ang = math.degrees(math.atan2(v.x, v.y))
    if ang < 0.0:
        ang += 360.0
    return ang

def round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))

def format_bearing(deg: float) -> str:
    s = f"{deg:.1f}"
    return "0.0" if s in ("360.0", "-0.0") else s
