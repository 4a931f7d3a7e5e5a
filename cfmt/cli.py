from __future__ import annotations

import argparse
import json
import logging
import os
import re
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from .api import format as format_template
from .api import format_value
from .config import load_settings, load_vars_file
from .errors import CFUserError
from .numeric.symbols import known_locales
from .report import build_placeholders_report
from .version import tool_version

DEBUG_ENV = "CFMT_DEBUG"

_INT_RE = re.compile(r"[+-]?\d+", re.ASCII)
_FLOAT_RE = re.compile(r"[+-]?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def _setup_logging() -> None:
    log = logging.getLogger("cfmt")
    log.setLevel(logging.DEBUG if os.environ.get(DEBUG_ENV) else logging.WARNING)
    if not log.handlers:
        h = logging.StreamHandler()
        h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        log.addHandler(h)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="cfmt",
        description="Composite-string formatter: ${key[,alignment][:format]} placeholders",
        add_help=True,
    )
    p.add_argument("-v", "--version", action="version", version=f"%(prog)s {tool_version()}")
    sub = p.add_subparsers(dest="cmd", required=True)

    def add_template(sp: argparse.ArgumentParser) -> None:
        sp.add_argument(
            "template",
            metavar="TEXT|@FILE|-",
            help="template text: a literal string, @file to read from a file, or - to read from stdin",
        )

    def add_locale(sp: argparse.ArgumentParser) -> None:
        sp.add_argument(
            "--locale",
            help="locale for f/n/p specifiers (e.g. en-US, de, fr-CH); defaults to CFMT_LOCALE or the system locale",
        )

    sp_render = sub.add_parser("render", help="Substitute placeholders and print the result")
    add_template(sp_render)
    sp_render.add_argument(
        "--var",
        action="append",
        metavar="KEY=VALUE",
        help="substitution value (can be repeated); numeric literals are passed as numbers",
    )
    sp_render.add_argument(
        "--vars",
        metavar="FILE",
        help="YAML file with a mapping of substitution values",
    )
    add_locale(sp_render)

    sp_value = sub.add_parser("value", help="Format a single value")
    sp_value.add_argument("value", help="value; numeric literals are formatted as numbers")
    sp_value.add_argument("format", help="format specifier, e.g. d6, x, N0, p1")
    add_locale(sp_value)

    sp_ph = sub.add_parser("placeholders", help="List placeholders of a template (JSON)")
    add_template(sp_ph)

    sub.add_parser("locales", help="List built-in locales (JSON)")

    return p


def _coerce_scalar(text: str) -> Any:
    """Numeric literals become int/float, everything else stays a string."""
    if _INT_RE.fullmatch(text):
        return int(text)
    if _FLOAT_RE.fullmatch(text):
        return float(text)
    return text


def _parse_vars(items: Optional[List[str]]) -> Dict[str, Any]:
    """Parses a list of KEY=VALUE items into a mapping."""
    result: Dict[str, Any] = {}
    if not items:
        return result
    for item in items:
        if "=" not in item:
            raise ValueError(f"Invalid variable '{item}'. Expected 'KEY=VALUE'")
        key, value = item.split("=", 1)
        if not key:
            raise ValueError(f"Invalid variable '{item}'. Key must not be empty")
        result[key] = _coerce_scalar(value)
    return result


def _read_template(arg: str) -> str:
    """
    Reads the template argument.

    Supports three forms:
    - literal string: "Hello ${name}"
    - file: @path/to/template.txt
    - stdin: -
    """
    if arg == "-":
        return sys.stdin.read()
    if arg.startswith("@"):
        file_path = Path(arg[1:])
        if not file_path.is_file():
            raise ValueError(f"Template file not found: {file_path}")
        try:
            return file_path.read_text(encoding="utf-8")
        except OSError as e:
            raise ValueError(f"Failed to read template file {file_path}: {e}") from e
    return arg


def _dumps(data: Any) -> str:
    return json.dumps(data, ensure_ascii=False, indent=2) + "\n"


def main(argv: list[str] | None = None) -> int:
    ns = _build_parser().parse_args(argv)
    _setup_logging()

    try:
        if ns.cmd == "render":
            settings = load_settings(Path.cwd())
            substitutions: Dict[str, Any] = dict(settings.vars)
            if ns.vars:
                substitutions.update(load_vars_file(Path(ns.vars)))
            substitutions.update(_parse_vars(ns.var))
            text = format_template(_read_template(ns.template), substitutions, ns.locale or settings.locale)
            sys.stdout.write(text)
            return 0

        if ns.cmd == "value":
            settings = load_settings(Path.cwd())
            sys.stdout.write(format_value(_coerce_scalar(ns.value), ns.format, ns.locale or settings.locale) + "\n")
            return 0

        if ns.cmd == "placeholders":
            report = build_placeholders_report(_read_template(ns.template))
            sys.stdout.write(_dumps(report.model_dump(mode="json")))
            return 0

        if ns.cmd == "locales":
            sys.stdout.write(_dumps({"locales": known_locales()}))
            return 0

    except CFUserError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2
    except ValueError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2

    return 2


if __name__ == "__main__":
    raise SystemExit(main())
