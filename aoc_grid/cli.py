from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Dict

from .config import RunConfig
from .days import DAYS, run_day
from .errors import AocGridError


logger = logging.getLogger(__name__)


def _day(value: str) -> str:
    if value == "all":
        return value
    try:
        day = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a day: {value!r}") from None
    if day not in DAYS:
        known = ", ".join(str(d) for d in sorted(DAYS))
        raise argparse.ArgumentTypeError(f"no solver for day {day} (have {known})")
    return value


def main(argv: Any = None) -> int:
    parser = argparse.ArgumentParser(description="Grid puzzle solvers")
    parser.add_argument("day", type=_day, help="Day number, or 'all'")
    parser.add_argument("--test", action="store_true", help="Use the dayN-test.txt example input")
    parser.add_argument("--input-dir", default="input", help="Directory holding dayN.txt files")
    parser.add_argument("--output-dir", default="output", help="Directory for rendered images")
    parser.add_argument("--render", action="store_true", help="Write PNG/GIF renderings")
    parser.add_argument("--progress", action="store_true", help="Show progress for long simulations")
    parser.add_argument("--log-level", default="WARNING", help="Logging level")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    config = RunConfig(
        input_dir=args.input_dir,
        output_dir=args.output_dir,
        test_mode=args.test,
        render=args.render,
        progress=args.progress,
    )
    days = sorted(DAYS) if args.day == "all" else [int(args.day)]

    results: Dict[str, Any] = {}
    status = 0
    for day in days:
        try:
            results[f"day{day}"] = run_day(day, config)
        except (AocGridError, FileNotFoundError) as e:
            logger.error("day %d failed: %s", day, e)
            print(f"error:\n{e}", file=sys.stderr)
            status = 1
    print(json.dumps(results, indent=2))
    return status


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
