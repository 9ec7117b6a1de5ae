from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, TextIO

import yaml

from .lut import TABLES

FORMATS = ("text", "json", "yaml")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Dump sRGB lookup tables")
    parser.add_argument(
        "--table",
        choices=sorted(TABLES),
        default="linear",
        help="Table to print",
    )
    parser.add_argument("--format", choices=FORMATS, default="text")
    parser.add_argument(
        "--precision",
        type=int,
        default=6,
        help="Decimals for float tables",
    )
    parser.add_argument(
        "--validate", action="store_true", help="Validate arguments and exit"
    )
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    return parser


def validate_args(args: argparse.Namespace) -> list[str]:
    errors: list[str] = []
    if not (0 <= args.precision <= 17):
        errors.append("--precision must be within [0,17]")
    return errors


def table_values(name: str, precision: int = 6) -> list:
    ramp = TABLES[name].value
    if ramp.dtype.kind == "f":
        return [round(float(v), precision) for v in ramp]
    return [int(v) for v in ramp]


def write_table(name: str, fmt: str, precision: int, out: TextIO) -> None:
    values = table_values(name, precision)
    if fmt == "json":
        json.dump({"table": name, "values": values}, out)
        out.write("\n")
    elif fmt == "yaml":
        yaml.safe_dump({"table": name, "values": values}, out, sort_keys=False)
    else:
        for idx, val in enumerate(values):
            out.write(f"{idx} {val}\n")


def main(argv: List[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
        # basicConfig leaves the level alone when root already has handlers
        logging.getLogger().setLevel(logging.DEBUG)

    errs = validate_args(args)
    if errs:
        for e in errs:
            print(f"validation error: {e}", file=sys.stderr)
        raise SystemExit(1)
    if args.validate:
        return

    write_table(args.table, args.format, args.precision, sys.stdout)
    logging.info("wrote %s table as %s", args.table, args.format)


if __name__ == "__main__":  # pragma: no cover
    main()
