#!/usr/bin/env python3
"""PIN token inspector — CLI for checking and building PIN tokens.

Usage:
    python3 tools/pin_tool.py <command> [args...]

Commands:
    check <tokens...>       Parse tokens ("-" reads one token per line from stdin)
    render --type K ...     Build a token from its attributes
    table                   Show the accepted bytes and their classification
    transform <token> <ops> Apply transformations in order (enhance, flip, ...)

Environment:
    PIN_OUTPUT          Output format, text or json (default: text)
    PIN_LOG_LEVEL       Logging level (default: WARNING)
"""

import argparse
import json
import logging
import os
import sys

from pin import Identifier, PinError, Side, State, parse
from pin.core.parser import BYTE_TABLE, ByteKind

log = logging.getLogger("pin_tool")

DEFAULT_OUTPUT = os.environ.get("PIN_OUTPUT", "text")
DEFAULT_LOG_LEVEL = os.environ.get("PIN_LOG_LEVEL", "WARNING")

TRANSFORMS = (
    "enhance", "diminish", "normalize", "flip", "mark_terminal", "unmark_terminal",
)


# ---- Output formatting ----

def print_table(rows, headers):
    """Print aligned columns."""
    if not rows:
        print("(no results)")
        return
    widths = [len(h) for h in headers]
    for row in rows:
        for i, val in enumerate(row):
            widths[i] = max(widths[i], len(str(val)))
    fmt = "  ".join(f"{{:<{w}}}" for w in widths)
    print(fmt.format(*headers))
    print(fmt.format(*["-" * w for w in widths]))
    for row in rows:
        print(fmt.format(*[str(v) for v in row]))


def describe(identifier):
    return {
        "token": identifier.to_string(),
        "type": identifier.type,
        "side": identifier.side.value,
        "state": identifier.state.value,
        "terminal": identifier.terminal,
    }


def _read_tokens(tokens):
    for token in tokens:
        if token == "-":
            for line in sys.stdin:
                line = line.rstrip("\r\n")
                if line:
                    yield line
        else:
            yield token


# ---- Commands ----

def cmd_check(args):
    rows = []
    failed = 0
    for token in _read_tokens(args.tokens):
        result = parse(token)
        if result.ok:
            rows.append({**describe(result.value), "valid": True})
            continue
        failed += 1
        log.debug("rejected %r bytes=%s: %s", token,
                  token.encode("utf-8", "surrogatepass").hex(" "), result.error.value)
        rows.append({
            "token": token,
            "valid": False,
            "error": result.error.value,
            "message": result.error.message,
        })

    if args.output == "json":
        print(json.dumps(rows, indent=2))
    else:
        for row in rows:
            if row["valid"]:
                print(f"{row['token']}: type={row['type']} side={row['side']} "
                      f"state={row['state']} terminal={str(row['terminal']).lower()}")
            else:
                print(f"{row['token']!r}: ERROR {row['error']} ({row['message']})")
    return 1 if failed else 0


def cmd_render(args):
    try:
        identifier = Identifier(args.type, args.side, args.state, args.terminal)
    except PinError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2
    if args.output == "json":
        print(json.dumps(describe(identifier)))
    else:
        print(identifier)
    return 0


def cmd_table(args):
    entries = [bc for bc in BYTE_TABLE if bc.kind is not ByteKind.INVALID]
    if args.output == "json":
        print(json.dumps([
            {
                "byte": bc.hex,
                "char": chr(bc.value),
                "kind": bc.kind.value,
                "type": bc.type,
                "side": bc.side.value if bc.side else None,
                "state": bc.state.value if bc.state else None,
            }
            for bc in entries
        ], indent=2))
        return 0
    rows = [
        (bc.hex, chr(bc.value), bc.kind.value, bc.type or "",
         bc.side.value if bc.side else "", bc.state.value if bc.state else "")
        for bc in entries
    ]
    print_table(rows, ["Byte", "Char", "Kind", "Type", "Side", "State"])
    return 0


def cmd_transform(args):
    result = parse(args.token)
    if not result.ok:
        print(f"ERROR: {args.token!r}: {result.error.message}", file=sys.stderr)
        return 1
    identifier = result.value
    for op in args.ops:
        identifier = getattr(identifier, op)()
        log.debug("%s -> %s", op, identifier)
    if args.output == "json":
        print(json.dumps(describe(identifier)))
    else:
        print(identifier)
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="pin_tool",
        description="Inspect and build PIN (Piece Identifier Notation) tokens",
    )
    parser.add_argument("--output", choices=("text", "json"), default=DEFAULT_OUTPUT,
                        help="Output format (default: $PIN_OUTPUT or text)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log rejected tokens and transformation steps")

    sub = parser.add_subparsers(dest="command", required=True)

    p_check = sub.add_parser("check", help="Parse tokens")
    p_check.add_argument("tokens", nargs="+", help='Tokens, or "-" for stdin')
    p_check.set_defaults(func=cmd_check)

    p_render = sub.add_parser("render", help="Build a token from attributes")
    p_render.add_argument("--type", required=True, help="Piece type A-Z")
    p_render.add_argument("--side", default=Side.FIRST.value,
                          choices=[s.value for s in Side])
    p_render.add_argument("--state", default=State.NORMAL.value,
                          choices=[s.value for s in State])
    p_render.add_argument("--terminal", action="store_true")
    p_render.set_defaults(func=cmd_render)

    p_table = sub.add_parser("table", help="Show accepted bytes")
    p_table.set_defaults(func=cmd_table)

    p_transform = sub.add_parser("transform", help="Apply transformations")
    p_transform.add_argument("token")
    p_transform.add_argument("ops", nargs="+", choices=TRANSFORMS)
    p_transform.set_defaults(func=cmd_transform)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else DEFAULT_LOG_LEVEL.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
