#!/usr/bin/env python3
"""
Declaration file example for Variants.

Loads the enums declared in weekday.yaml, runs the naming pipeline on each
and prints the report, then looks a few strings up in the reverse map.
"""

import sys
from pathlib import Path

from variants import LookupNotFoundError, load_declaration, run_naming
from variants.utils.report import render_report


def main(path=None):
    """Print naming reports for a declaration file."""
    path = Path(path) if path else Path(__file__).with_name("weekday.yaml")

    for table in load_declaration(path):
        artifacts = run_naming(table)
        print(render_report(artifacts))

        for text in ("Sum", "Sun", "DAY"):
            try:
                symbol = artifacts.reverse_map.find(text)
                print(f"{table.name}: {text!r} -> {symbol.identifier}")
            except LookupNotFoundError:
                print(f"{table.name}: {text!r} matches nothing")
        print()


if __name__ == "__main__":
    main(sys.argv[1] if len(sys.argv) > 1 else None)
