"""Command line entry point that runs one policy function on a JSON payload."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .validate import validate, validate_settings

FUNCTIONS = {"validate": validate, "validate_settings": validate_settings}


def main(argv=None) -> int:
    """Read a payload, run the chosen function and print its JSON response."""
    parser = argparse.ArgumentParser(prog="palindrome-policy")
    parser.add_argument("function", choices=sorted(FUNCTIONS))
    parser.add_argument("-i", "--input", type=Path, help="payload file (default: stdin)")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)
    payload = args.input.read_bytes() if args.input else sys.stdin.buffer.read()
    print(FUNCTIONS[args.function](payload).decode("utf-8"))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())