"""Command line harness for seeded Xorshift32 draw sessions."""

import argparse
import json
import logging
import os
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_LOG_PATH = PROJECT_ROOT / "draw_logs" / "latest_run.json"
LOG_LEVEL_ENV = "XORSHIFT_PRNG_LOG_LEVEL"

if PROJECT_ROOT.as_posix() not in sys.path:
    sys.path.insert(0, PROJECT_ROOT.as_posix())

from xorshift_prng import DrawConfig, PRNGError, run_draw_session
from xorshift_prng.session import DRAW_KINDS


def _parse_kinds(value: str) -> tuple[str, ...]:
    """Parse a CLI `kinds=integer,float` style option into a tuple of draw kinds."""

    if "=" in value:
        key, _, payload = value.partition("=")
        if key.strip().lower() not in {"kind", "kinds"}:
            raise argparse.ArgumentTypeError(
                f"Expected prefix 'kind=' or 'kinds=', received '{value}'."
            )
    else:
        payload = value

    kinds = tuple(part.strip().lower() for part in payload.split(",") if part.strip())
    if not kinds:
        raise argparse.ArgumentTypeError("Kind list cannot be empty.")

    unknown = sorted(set(kinds) - set(DRAW_KINDS))
    if unknown:
        raise argparse.ArgumentTypeError(
            "Unknown draw kind(s): %s. Choose from %s." % (", ".join(unknown), ", ".join(DRAW_KINDS))
        )
    return kinds


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run a deterministic Xorshift32 draw session")
    parser.add_argument(
        "--seed",
        type=lambda value: int(value, 0),
        default=1,
        help="Generator seed (accepts decimal or 0x-prefixed hex)",
    )
    parser.add_argument("--draws", type=int, default=10, help="Number of values to draw")
    parser.add_argument("--min", dest="range_min", type=int, default=0, help="Inclusive lower bound for range draws")
    parser.add_argument("--max", dest="range_max", type=int, default=100, help="Exclusive upper bound for range draws")
    parser.add_argument(
        "--checkpoint",
        type=int,
        default=None,
        help="Save the state after this draw and verify a replay of the remainder",
    )
    parser.add_argument(
        "--kinds",
        metavar="kinds=list",
        type=_parse_kinds,
        default=DRAW_KINDS,
        help="Comma-separated draw kinds cycled per draw (e.g. kinds=integer,float)",
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get(LOG_LEVEL_ENV, "WARNING"),
        help=f"Logging level for stderr diagnostics (default from ${LOG_LEVEL_ENV} or WARNING)",
    )
    parser.add_argument(
        "--log",
        nargs="?",
        type=Path,
        const=DEFAULT_LOG_PATH,
        help=(
            "Persist the JSON report to disk. Provide a path or pass the flag alone to use "
            "draw_logs/latest_run.json under the repository root."
        ),
    )
    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()

    level = getattr(logging, str(args.log_level).upper(), None)
    if not isinstance(level, int):
        parser.error(f"unknown log level: {args.log_level}")
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    cfg = DrawConfig(
        seed=args.seed,
        draws=args.draws,
        range_min=args.range_min,
        range_max=args.range_max,
        checkpoint_at=args.checkpoint,
        kinds=args.kinds,
    )
    try:
        result = run_draw_session(cfg)
    except PRNGError as exc:
        parser.error(str(exc))

    log_path: Path | None = args.log
    if log_path is not None:
        if not log_path.is_absolute():
            log_path = (PROJECT_ROOT / log_path).resolve()

        log_path.parent.mkdir(parents=True, exist_ok=True)
        log_path.write_text(json.dumps(result, indent=2))

    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
