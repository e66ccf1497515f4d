from models import FAIL_FORMAT, FAIL_MISSING, FAIL_UNSUPPORTED, GridFailure, Solution
from solution_text import elevation_text, failure_text, solution_text


def test_solution_text():
    sol = Solution(angle="135.0", range=424, mils=1420, too_close=False, too_far=False)
    assert solution_text(sol, "a1", "b2") == (
        "Дальность: 424 метров\n"
        "Угол: 135.0° | Возвышение: 1420 мрад\n"
        "A1 -> B2"
    )


def test_elevation_text_flags():
    close = Solution(angle="0.0", range=0, mils=None, too_close=True, too_far=False)
    far = Solution(angle="90.0", range=2000, mils=None, too_close=False, too_far=True)
    assert elevation_text(close) == "слишком близко"
    assert elevation_text(far) == "слишком далеко"


def test_failure_text():
    assert "E5 " in failure_text(GridFailure(grid="E5 ", kind=FAIL_FORMAT, reason="x"))
    assert failure_text(GridFailure(grid="", kind=FAIL_MISSING, reason="Не хватает параметров: target")) \
        == "Не хватает параметров: target"
    msg = failure_text(GridFailure(grid="e5-0", kind=FAIL_UNSUPPORTED, reason="Цифра 0"))
    assert "E5-0" in msg and "Цифра 0" in msg


def test_to_json_shapes():
    sol = Solution(angle="90.0", range=300, mils=1475, too_close=False, too_far=False)
    assert sol.to_json() == {"angle": "90.0", "range": 300, "mils": 1475, "tooClose": False, "tooFar": False}
    fail = GridFailure(grid="A0", kind=FAIL_UNSUPPORTED, reason="r")
    assert fail.to_json() == {"grid": "A0", "kind": "unsupported", "reason": "r"}
