"""
Unit tests for declaration loading.

Tests building symbol tables from dictionaries and from YAML/JSON files,
including the validation errors for malformed declarations.
"""

import json

import pytest
import yaml

from variants.naming.declaration import load_declaration, table_from_dict
from variants.naming.policy import TypePolicy, ValuePolicy
from variants.utils.exceptions import DeclarationError, InvalidPolicyError


WEEKDAY_DECLARATION = {
    "name": "Weekday",
    "rename": "uppercase",
    "rename_abbr": "lowercase",
    "from_str": True,
    "variants": [
        "Monday",
        {"ident": "Tuesday", "rename": "DayAfterMonday", "rename_abbr": ["uppercase"]},
        {"ident": "Wednesday", "skip": True},
    ],
}


class TestTableFromDict:
    """Test table_from_dict."""

    def test_full_declaration(self):
        table = table_from_dict(WEEKDAY_DECLARATION)

        assert table.name == "Weekday"
        assert table.identifiers == ("Monday", "Tuesday", "Wednesday")
        assert table.type_primary_policy is TypePolicy.UPPERCASE
        assert table.type_abbr_policy is TypePolicy.LOWERCASE
        assert table.emit_from_str is True
        assert table.emit_display is False

        monday, tuesday, wednesday = table.symbols
        assert monday.primary_policy is None
        assert tuesday.primary_policy == ValuePolicy.literal("DayAfterMonday")
        assert tuesday.abbr_policy == ValuePolicy.uppercase()
        assert wednesday.skip

    def test_minimal_declaration(self):
        table = table_from_dict({"variants": []})
        assert len(table) == 0
        assert table.name == ""
        assert table.type_primary_policy is None

    def test_explicit_literal(self):
        table = table_from_dict({"variants": [{"ident": "A", "rename": {"literal": "lowercase"}}]})
        assert table.symbols[0].primary_policy == ValuePolicy.literal("lowercase")

    def test_not_a_mapping(self):
        with pytest.raises(DeclarationError, match="mapping"):
            table_from_dict(["Monday"])

    def test_unknown_type_level_key(self):
        with pytest.raises(DeclarationError, match="Unknown type-level option"):
            table_from_dict({"variants": [], "serialize": True})

    def test_unknown_variant_key(self):
        with pytest.raises(DeclarationError, match="Unknown variant-level option"):
            table_from_dict({"variants": [{"ident": "A", "hidden": True}]})

    def test_variants_must_be_list(self):
        with pytest.raises(DeclarationError, match="must be a list"):
            table_from_dict({"variants": "Monday"})

    def test_missing_variants(self):
        with pytest.raises(DeclarationError):
            table_from_dict({"name": "Empty"})

    def test_missing_ident(self):
        with pytest.raises(DeclarationError, match="ident"):
            table_from_dict({"variants": [{"rename": "x"}]})

    def test_bad_variant_entry(self):
        with pytest.raises(DeclarationError):
            table_from_dict({"variants": [42]})

    @pytest.mark.parametrize("key", ["display", "from_str"])
    def test_flags_must_be_boolean(self, key):
        with pytest.raises(DeclarationError, match="boolean"):
            table_from_dict({"variants": [], key: "yes"})

    def test_skip_must_be_boolean(self):
        with pytest.raises(DeclarationError, match="boolean"):
            table_from_dict({"variants": [{"ident": "A", "skip": 1}]})

    def test_invalid_type_policy(self):
        with pytest.raises(InvalidPolicyError):
            table_from_dict({"variants": [], "rename": "DayAfterMonday"})

    def test_invalid_value_policy_names_variant(self):
        with pytest.raises(InvalidPolicyError) as exc_info:
            table_from_dict({"variants": [{"ident": "Tuesday", "rename_abbr": ["a", "b"]}]})
        assert exc_info.value.details["variant"] == "Tuesday"

    def test_duplicate_identifiers(self):
        with pytest.raises(DeclarationError, match="Duplicate"):
            table_from_dict({"name": "Twice", "variants": ["A", "A"]})

    def test_error_source_defaults_to_name(self):
        with pytest.raises(DeclarationError) as exc_info:
            table_from_dict({"name": "Weekday", "variants": None})
        assert exc_info.value.source == "Weekday"


class TestLoadDeclaration:
    """Test load_declaration."""

    def test_yaml_single_declaration(self, declaration_dir):
        path = declaration_dir / "weekday.yaml"
        path.write_text(yaml.safe_dump(WEEKDAY_DECLARATION))

        tables = load_declaration(path)

        assert len(tables) == 1
        assert tables[0] == table_from_dict(WEEKDAY_DECLARATION)

    def test_yml_suffix(self, declaration_dir):
        path = declaration_dir / "weekday.yml"
        path.write_text("name: Letters\nvariants: [A, B]\n")

        assert load_declaration(str(path))[0].identifiers == ("A", "B")

    def test_json_enums_list(self, declaration_dir):
        path = declaration_dir / "enums.json"
        path.write_text(json.dumps({"enums": [WEEKDAY_DECLARATION, {"name": "Empty", "variants": []}]}))

        tables = load_declaration(path)

        assert [table.name for table in tables] == ["Weekday", "Empty"]

    def test_enums_must_be_list(self, declaration_dir):
        path = declaration_dir / "bad.yaml"
        path.write_text("enums: Weekday\n")

        with pytest.raises(DeclarationError, match="must be a list"):
            load_declaration(path)

    def test_missing_file(self, declaration_dir):
        with pytest.raises(DeclarationError, match="Cannot read") as exc_info:
            load_declaration(declaration_dir / "missing.yaml")
        assert exc_info.value.source.endswith("missing.yaml")

    def test_malformed_yaml(self, declaration_dir):
        path = declaration_dir / "broken.yaml"
        path.write_text("variants: [A, B\n")

        with pytest.raises(DeclarationError, match="Cannot parse"):
            load_declaration(path)

    def test_malformed_json(self, declaration_dir):
        path = declaration_dir / "broken.json"
        path.write_text("{not json")

        with pytest.raises(DeclarationError, match="Cannot parse"):
            load_declaration(path)

    def test_errors_carry_file_source(self, declaration_dir):
        path = declaration_dir / "unknown.yaml"
        path.write_text("variants: []\ncolor: red\n")

        with pytest.raises(DeclarationError) as exc_info:
            load_declaration(path)
        assert exc_info.value.source == str(path)
