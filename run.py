import argparse, json, logging, sys, traceback

from config import CRASH_LOG


def excepthook(exctype, value, tb):
    msg = "".join(traceback.format_exception(exctype, value, tb))
    try:
        with open(CRASH_LOG, "a", encoding="utf-8") as f:
            f.write(msg + "\n")
    except OSError:
        pass
    print("UNHANDLED EXCEPTION\n" + msg, file=sys.stderr)
    sys.exit(1)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="mortar-calc", description="Решение для миномета по двум квадратам")
    p.add_argument("origin", help="квадрат миномета, например E5-26")
    p.add_argument("target", help="квадрат цели, например F7-3")
    p.add_argument("--json", action="store_true", help="вывод в JSON")
    p.add_argument("-v", "--verbose", action="store_true")
    return p


def main(argv=None) -> int:
    sys.excepthook = excepthook
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    from solver import calculate_solution
    from solution_text import failure_text, solution_text

    origin, target = args.origin.strip(), args.target.strip()
    res = calculate_solution(origin, target)
    if args.json:
        print(json.dumps({"ok": res.ok, **res.to_json()}, ensure_ascii=False))
    elif res.ok:
        print(solution_text(res, origin, target))
    else:
        print(failure_text(res))
    return 0 if res.ok else 2


if __name__ == "__main__":
    sys.exit(main())
