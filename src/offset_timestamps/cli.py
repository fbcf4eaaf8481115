"""CLI entrypoints for the timestamp helpers."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from zoneinfo import ZoneInfoNotFoundError

from offset_timestamps.calendars import build_weekend_calendar
from offset_timestamps.config import ConfigError, ExtensionsConfig, load_config
from offset_timestamps.timestamps import (
    add_business_days,
    is_between,
    is_business_day,
    to_utc_datetime,
)


def build_parser() -> argparse.ArgumentParser:
    parser: argparse.ArgumentParser = argparse.ArgumentParser(prog="offset-timestamps")
    parser.add_argument("--config", type=Path, default=None, help="Optional YAML/JSON config supplying defaults")
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override logging.level from the config",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    to_utc: argparse.ArgumentParser = subparsers.add_parser("to-utc", help="Convert a timestamp to UTC")
    to_utc.add_argument("--timestamp", required=True, help="ISO-8601 timestamp, e.g. 2025-07-04T23:00:00-05:00")

    business_day: argparse.ArgumentParser = subparsers.add_parser(
        "is-business-day", help="Check whether a timestamp falls on a business day"
    )
    business_day.add_argument("--timestamp", required=True)
    business_day.add_argument("--zone", default=None, help="IANA timezone used to classify the day")
    business_day.add_argument("--locale", default=None, help="Locale whose weekend applies, e.g. he_IL")

    add_days: argparse.ArgumentParser = subparsers.add_parser(
        "add-business-days", help="Shift a timestamp by a number of business days"
    )
    add_days.add_argument("--timestamp", required=True)
    add_days.add_argument("--count", type=int, required=True, help="Business days to add (negative to go back)")
    add_days.add_argument("--zone", default=None)
    add_days.add_argument("--locale", default=None)

    between: argparse.ArgumentParser = subparsers.add_parser(
        "is-between", help="Check whether a timestamp lies within a range (boundaries in any order)"
    )
    between.add_argument("--timestamp", required=True)
    between.add_argument("--start", required=True)
    between.add_argument("--end", required=True)
    inclusive = between.add_mutually_exclusive_group()
    inclusive.add_argument("--inclusive", dest="inclusive", action="store_true", default=None)
    inclusive.add_argument("--exclusive", dest="inclusive", action="store_false")

    validate: argparse.ArgumentParser = subparsers.add_parser("validate-config", help="Validate a config file")
    validate.add_argument("path", type=Path)

    dump: argparse.ArgumentParser = subparsers.add_parser("print-config", help="Print the effective config")
    dump.add_argument("--format", choices=["json"], default="json")

    schema: argparse.ArgumentParser = subparsers.add_parser("schema", help="Print the config JSON schema")
    schema.add_argument("--format", choices=["json"], default="json")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser: argparse.ArgumentParser = build_parser()
    args: argparse.Namespace = parser.parse_args(argv)

    if args.command == "validate-config":
        try:
            _ = load_config(args.path)
        except ConfigError as exc:
            print(str(exc), file=sys.stderr)
            return 1
        print("OK")
        return 0

    if args.command == "schema":
        print(json.dumps(ExtensionsConfig.model_json_schema(), indent=2, sort_keys=True))
        return 0

    try:
        config = load_config(args.config) if args.config is not None else ExtensionsConfig()
    except ConfigError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    logging.basicConfig(
        level=args.log_level or config.logging.level.value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "print-config":
        print(json.dumps(config.model_dump(mode="json"), indent=2, sort_keys=True))
        return 0

    try:
        payload = _run_operation(args, config)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        print(str(exc), file=sys.stderr)
        return 1

    print(json.dumps(payload, indent=2, sort_keys=True))
    return 0


def _run_operation(args: argparse.Namespace, config: ExtensionsConfig) -> dict[str, object]:
    weekends = build_weekend_calendar(config.calendar)
    zone = getattr(args, "zone", None) or config.defaults.zone
    locale = getattr(args, "locale", None) or config.defaults.locale

    if args.command == "to-utc":
        return {"timestamp": args.timestamp, "utc": to_utc_datetime(args.timestamp).isoformat()}

    if args.command == "is-business-day":
        return {
            "timestamp": args.timestamp,
            "zone": zone,
            "locale": locale,
            "is_business_day": is_business_day(args.timestamp, zone, locale, weekends=weekends),
        }

    if args.command == "add-business-days":
        result = add_business_days(args.timestamp, args.count, zone, locale, weekends=weekends)
        return {
            "timestamp": args.timestamp,
            "count": args.count,
            "zone": zone,
            "locale": locale,
            "result": result.isoformat(),
        }

    if args.command == "is-between":
        inclusive = config.defaults.inclusive if args.inclusive is None else args.inclusive
        return {
            "timestamp": args.timestamp,
            "start": args.start,
            "end": args.end,
            "inclusive": inclusive,
            "is_between": is_between(args.timestamp, args.start, args.end, inclusive=inclusive),
        }

    raise AssertionError(f"Unhandled command: {args.command}")

