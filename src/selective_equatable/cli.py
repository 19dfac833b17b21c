"""Command-line interface comparing two JSON record collections."""
from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any

from .config import DEFAULT_IDENTITY, MatchConfig, ReportConfig
from .core.equivalence import EquivalenceMatcher
from .report import ReportBuilder

logger = logging.getLogger(__name__)

EXIT_EQUIVALENT = 0
EXIT_NOT_EQUIVALENT = 1
EXIT_INPUT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Check whether two JSON arrays of records hold the same records by identity"
    )
    parser.add_argument("first", type=Path, help="JSON file holding the first array of records")
    parser.add_argument("second", type=Path, help="JSON file holding the second array of records")
    parser.add_argument(
        "--by",
        dest="fields",
        action="append",
        default=[],
        metavar="FIELD",
        help="Compare only this field (repeatable, dotted paths allowed); compares whole records if omitted",
    )
    parser.add_argument("--identity", default=DEFAULT_IDENTITY, help="Field used to pair records across files")
    parser.add_argument("--json", action="store_true", help="Print a JSON report instead of text")
    parser.add_argument("--quiet", action="store_true", help="Print nothing; report through the exit status only")
    parser.add_argument("--no-values", action="store_true", help="Omit differing values from the report")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging verbosity")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        first = load_records(args.first)
        second = load_records(args.second)
    except (OSError, ValueError) as exc:
        logger.error("Failed to load records: %s", exc)
        return EXIT_INPUT_ERROR

    fields = tuple(args.fields)
    try:
        matcher = EquivalenceMatcher(MatchConfig(identity=args.identity, fields=fields))
        result = matcher.compare(first, second)
    except (AttributeError, KeyError, TypeError) as exc:
        logger.error(
            "Records cannot be compared (identity=%r, fields=%r): %s",
            args.identity,
            list(fields),
            exc,
        )
        return EXIT_INPUT_ERROR
    logger.info(
        "Compared %s (%d records) with %s (%d records): %s",
        args.first,
        result.first_count,
        args.second,
        result.second_count,
        "equivalent" if result.equivalent else "not equivalent",
    )

    if not args.quiet:
        first_label, second_label = args.first.name, args.second.name
        if first_label == second_label:
            first_label, second_label = "first", "second"
        builder = ReportBuilder(
            ReportConfig(
                first_label=first_label,
                second_label=second_label,
                include_values=not args.no_values,
            )
        )
        if args.json:
            print(json.dumps(builder.build_json(result, fields), indent=2, default=str))
        else:
            print(builder.build_text(result, fields), end="")

    return EXIT_EQUIVALENT if result.equivalent else EXIT_NOT_EQUIVALENT


def load_records(path: Path) -> list[Any]:
    payload = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(payload, list):
        raise ValueError(f"{path} must contain a JSON array of records")
    return payload


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
