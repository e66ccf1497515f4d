from models import FAIL_FORMAT, FAIL_MISSING, GridFailure, Solution

NL = chr(10)


def elevation_text(sol: Solution) -> str:
    if sol.too_close:
        return "слишком близко"
    if sol.too_far:
        return "слишком далеко"
    return f"{sol.mils} мрад"

def solution_text(sol: Solution, origin: str, target: str) -> str:
    return NL.join([
        f"Дальность: {sol.range} метров",
        f"Угол: {sol.angle}° | Возвышение: {elevation_text(sol)}",
        f"{origin.upper()} -> {target.upper()}",
    ])

def failure_text(fail: GridFailure) -> str:
    if fail.kind == FAIL_MISSING:
        return fail.reason
    if fail.kind == FAIL_FORMAT:
        return f"Не валидный квадрат {fail.grid}"
    return f"Квадрат {fail.grid.upper()} вне карты: {fail.reason}"
