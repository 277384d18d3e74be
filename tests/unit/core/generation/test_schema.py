"""
Unit tests for ResultSchema defaulting.
"""
import pytest

from core.generation.schema import (
    FieldKind,
    FieldSpec,
    ResultSchema,
    is_non_empty_string,
    is_number,
)


def _schema(check=None):
    return ResultSchema(
        name="sample",
        fields=(
            FieldSpec("tags", FieldKind.SEQUENCE, [], item_check=is_non_empty_string),
            FieldSpec("rate", FieldKind.NUMBER, 0),
            FieldSpec("label", FieldKind.STRING, "none"),
            FieldSpec("level", FieldKind.CHOICE, "Medium", choices=("High", "Medium", "Low")),
        ),
        check=check,
    )


class TestFieldKinds:

    def test_bool_is_not_a_number(self):
        assert is_number(3)
        assert is_number(2.5)
        assert not is_number(True)
        assert not is_number("3")

    def test_non_finite_is_not_a_number(self):
        assert not is_number(float("nan"))
        assert not is_number(float("inf"))
        assert not is_number(float("-inf"))
        assert not is_number(10 ** 400)

    def test_blank_string_is_not_a_string_value(self):
        assert not is_non_empty_string("   ")
        assert is_non_empty_string("x")


class TestResultSchemaApply:

    def test_empty_reply_gets_every_default(self):
        assert _schema().apply({}) == {"tags": [], "rate": 0, "label": "none", "level": "Medium"}

    def test_well_typed_values_pass_through(self):
        parsed = {"tags": ["a", "b"], "rate": 4.5, "label": "ok", "level": "High"}
        assert _schema().apply(parsed) == parsed

    def test_mistyped_values_are_replaced(self):
        parsed = {"tags": "a,b", "rate": "4.5%", "label": 7, "level": "Very High"}
        assert _schema().apply(parsed) == {"tags": [], "rate": 0, "label": "none", "level": "Medium"}

    def test_malformed_sequence_items_are_dropped(self):
        result = _schema().apply({"tags": ["a", 3, "", None, "b"]})
        assert result["tags"] == ["a", "b"]

    def test_unknown_keys_are_ignored(self):
        result = _schema().apply({"extra": 1})
        assert "extra" not in result

    def test_defaults_are_not_shared_between_results(self):
        schema = _schema()
        first = schema.apply({})
        first["tags"].append("mutated")
        assert schema.apply({})["tags"] == []

    def test_infinite_number_is_replaced(self):
        assert _schema().apply({"rate": float("inf")})["rate"] == 0

    def test_check_failure_raises_value_error(self):
        def _needs_tags(result):
            if not result["tags"]:
                raise ValueError("no tags")

        with pytest.raises(ValueError):
            _schema(check=_needs_tags).apply({})

    def test_conforms(self):
        schema = _schema()
        assert schema.conforms(schema.apply({"rate": 3}))
        assert not schema.conforms({"rate": 3})

    def test_field_names_keep_declared_order(self):
        assert _schema().field_names == ("tags", "rate", "label", "level")
