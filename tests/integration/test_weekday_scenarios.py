"""
Integration tests for the naming pipeline on weekday declarations.

Each scenario declares the seven weekdays with a different combination of
type-level and variant-level rename options and checks every artifact the
pipeline derives from it.
"""

import pytest

from variants import LookupNotFoundError, load_declaration, run_naming, table_from_dict


WEEKDAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


def declare(tuesday=None, **options):
    """Weekday declaration with optional Tuesday overrides."""
    variants = list(WEEKDAYS)
    if tuesday is not None:
        variants[1] = dict(ident="Tuesday", **tuesday)
    return table_from_dict(dict(name="Weekday", variants=variants, **options))


def quoted(names):
    return ", ".join(f'"{name}"' for name in names)


class TestWeekdayScenarios:
    """End-to-end naming of the weekday enum."""

    def test_plain(self):
        artifacts = run_naming(declare())

        assert artifacts.listing.primary_names == tuple(WEEKDAYS)
        assert artifacts.listing.abbr_names == ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
        assert artifacts.listing.primary_listing == quoted(WEEKDAYS)
        assert artifacts.reverse_map.collisions() == {}

    def test_value_rename(self):
        artifacts = run_naming(declare(tuesday={"rename": "DayAfterMonday"}))

        assert artifacts.resolved.primary_of("Tuesday") == "DayAfterMonday"
        assert artifacts.resolved.abbr_of("Tuesday") == "Day"
        assert '"Monday", "DayAfterMonday", "Wednesday"' in artifacts.listing.primary_listing

    def test_value_rename_abbr(self):
        artifacts = run_naming(declare(tuesday={"rename_abbr": "tue"}))

        assert artifacts.resolved.primary_of("Tuesday") == "Tuesday"
        assert artifacts.resolved.abbr_of("Tuesday") == "tue"
        assert artifacts.reverse_map.find("tue").identifier == "Tuesday"
        with pytest.raises(LookupNotFoundError):
            artifacts.reverse_map.find("Tue")

    def test_value_rename_and_rename_abbr(self):
        artifacts = run_naming(declare(tuesday={"rename": "DayAfterMonday", "rename_abbr": "tue"}))

        assert artifacts.resolved.primary_of("Tuesday") == "DayAfterMonday"
        assert artifacts.resolved.abbr_of("Tuesday") == "tue"

    def test_type_rename(self):
        artifacts = run_naming(declare(rename="uppercase", rename_abbr="lowercase"))

        assert artifacts.listing.primary_names == tuple(day.upper() for day in WEEKDAYS)
        assert artifacts.listing.abbr_names == ("mon", "tue", "wed", "thu", "fri", "sat", "sun")

    def test_type_and_value_rename(self):
        artifacts = run_naming(declare(
            tuesday={"rename": "DayAfterMonday", "rename_abbr": ["Tue"]},
            rename=["uppercase"],
            rename_abbr=["lowercase"],
        ))

        assert artifacts.listing.primary_listing == quoted(
            ["MONDAY", "DayAfterMonday", "WEDNESDAY", "THURSDAY", "FRIDAY", "SATURDAY", "SUNDAY"]
        )
        assert artifacts.listing.abbr_listing == quoted(["mon", "Tue", "wed", "thu", "fri", "sat", "sun"])

    def test_value_case_abbr_over_literal_rename(self):
        artifacts = run_naming(declare(
            tuesday={"rename": "DayAfterMonday", "rename_abbr": "uppercase"},
            rename="uppercase",
            rename_abbr="lowercase",
        ))

        assert artifacts.resolved.primary_of("Monday") == "MONDAY"
        assert artifacts.resolved.abbr_of("Monday") == "mon"
        assert artifacts.resolved.primary_of("Tuesday") == "DayAfterMonday"
        assert artifacts.resolved.abbr_of("Tuesday") == "DAY"

    def test_skip(self):
        artifacts = run_naming(declare(tuesday={"skip": True}))

        remaining = [day for day in WEEKDAYS if day != "Tuesday"]
        assert artifacts.listing.count == 6
        assert artifacts.listing.primary_listing == quoted(remaining)
        assert artifacts.listing.abbr_listing == quoted(day[:3] for day in remaining)
        assert artifacts.resolved.primary_of("Tuesday") == "Tuesday"
        assert "Tuesday" not in artifacts.reverse_map
        assert len(artifacts.reverse_map) == 12

    def test_round_trip_every_name(self):
        artifacts = run_naming(declare(
            tuesday={"rename": "DayAfterMonday", "rename_abbr": "tue"},
            rename="lowercase",
            rename_abbr="uppercase",
        ))

        for name in artifacts.resolved.iter_iterable():
            assert artifacts.reverse_map.find(name.primary) is name.symbol
            assert artifacts.reverse_map.find(name.abbreviated) is name.symbol


class TestDeclarationFiles:
    """The same scenarios loaded from files."""

    def test_yaml_file(self, declaration_dir):
        path = declaration_dir / "weekday.yaml"
        path.write_text(
            "enums:\n"
            "  - name: Weekday\n"
            "    rename: [uppercase]\n"
            "    rename_abbr: [lowercase]\n"
            "    from_str: true\n"
            "    variants:\n"
            "      - Monday\n"
            "      - ident: Tuesday\n"
            "        rename: DayAfterMonday\n"
            "        rename_abbr: [Tue]\n"
            "      - Wednesday\n"
            "  - name: Color\n"
            "    variants: [Red, Green]\n"
        )

        weekday, color = load_declaration(path)
        weekday_artifacts = run_naming(weekday)
        color_artifacts = run_naming(color)

        assert weekday_artifacts.listing.primary_names == ("MONDAY", "DayAfterMonday", "WEDNESDAY")
        assert weekday_artifacts.listing.abbr_names == ("mon", "Tue", "wed")
        assert color_artifacts.reverse_map.find("Gre").identifier == "Green"
