#!/usr/bin/env python3
"""
Basic usage example for Variants.

This example decorates a weekday enum and shows the primary and abbreviated
names, iteration, the listings and parsing strings back to members.
"""

from enum import Enum

import variants
from variants import LookupNotFoundError


@variants.variants(
    rename="uppercase",
    rename_abbr="lowercase",
    from_str=True,
    display=True,
    overrides={
        "Tuesday": {"rename": "DayAfterMonday", "rename_abbr": "uppercase"},
        "Sunday": {"skip": True},
    },
)
class Weekday(Enum):
    Monday = 1
    Tuesday = 2
    Wednesday = 3
    Thursday = 4
    Friday = 5
    Saturday = 6
    Sunday = 7


def main():
    """Demonstrate basic Variants usage."""
    print("Variants - Basic Usage Example")
    print("=" * 60)

    print("\n1. Names of every member:")
    for member in Weekday:
        print(f"  {member.name:<10} {member.as_str():<16} {member.as_str_abbr()}")

    print("\n2. Iteration (skipped members excluded):")
    print(f"  count: {Weekday.ITERABLE_VARIANTS_COUNT}")
    print(f"  members: {[member.name for member in Weekday.iter_variants()]}")

    print("\n3. Listings:")
    print(f"  primary: {Weekday.VARIANTS_LIST_STR}")
    print(f"  abbreviated: {Weekday.VARIANTS_LIST_STR_ABBR}")

    print("\n4. Display:")
    print(f"  Today is {Weekday.Tuesday}")

    print("\n5. Parsing:")
    for text in ("MONDAY", "DAY", "fri", "SUNDAY"):
        try:
            print(f"  {text!r} -> {Weekday.from_str(text)!r}")
        except LookupNotFoundError as e:
            print(f"  {text!r} -> {e}")

    print(f"\nVariants version: {variants.__version__}")


if __name__ == "__main__":
    main()
