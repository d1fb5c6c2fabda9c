"""Command-line demonstration of substring enumeration."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from algos.windows import all_substrings, find_all_unique_substrings

DEFAULT_TEXT = "AABC"


def main(argv: Sequence[str] | None = None) -> int:
    """List every substring of a text, then those without repeated characters."""
    parser = argparse.ArgumentParser(
        prog="algos",
        description="List the substrings of a text and those without repeats.",
    )
    parser.add_argument("text", nargs="?", default=DEFAULT_TEXT, help="text to examine")
    args = parser.parse_args(argv)

    for substring in all_substrings(args.text):
        print(f"all substrings: {substring}")
    unique = find_all_unique_substrings(args.text)
    print(f"unique substrings: {', '.join(unique)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())