"""
Tests for the algebraic validators: unions and literals.
"""

import logging
from datetime import datetime, timezone

import pytest

from schemakit import Err, Ok, Schema, UnionValidator


class TestUnion:
    def test_valid(self):
        v = Schema.union(Schema.string(), Schema.number())
        assert v.validate("hello") == Ok("hello")
        assert v.validate(42) == Ok(42)

    def test_no_match(self):
        v = Schema.union(Schema.string(), Schema.number())
        for bad in [True, [], {}]:
            assert v.validate(bad).errors == ("Value does not match any of the allowed types",)

    def test_required(self):
        assert Schema.union(Schema.string()).validate(None).errors == ("Value is required",)
        assert Schema.union(Schema.string()).optional().validate(None) == Ok(None)

    def test_optional_alternative_does_not_make_union_optional(self):
        v = Schema.union(Schema.string().optional(), Schema.number())
        assert isinstance(v.validate(None), Err)

    def test_first_match_wins(self):
        v = Schema.union(Schema.literal("x"), Schema.string())
        assert v.validate("x") == Ok("x")
        assert v.options[0].validate("x") == Ok("x")

    def test_first_match_data_is_returned(self):
        # The date alternative converts, the string alternative does not
        as_date = Schema.union(Schema.date(), Schema.string())
        as_text = Schema.union(Schema.string(), Schema.date())
        assert as_date.validate("2023-01-01").data == datetime(2023, 1, 1, tzinfo=timezone.utc)
        assert as_text.validate("2023-01-01").data == "2023-01-01"

    def test_constrained_alternatives(self):
        v = Schema.union(Schema.string().min_length(5), Schema.number().min(100))
        assert isinstance(v.validate("hello"), Ok)
        assert isinstance(v.validate(150), Ok)
        assert isinstance(v.validate("hi"), Err)
        assert isinstance(v.validate(50), Err)

    def test_custom_message(self):
        v = Schema.union(Schema.string(), Schema.number()).with_message("Text or number")
        assert v.validate([]).errors == ("Text or number",)

    def test_empty_union_rejected(self):
        with pytest.raises(ValueError):
            Schema.union()

    def test_alternatives_must_be_validators(self):
        with pytest.raises(TypeError):
            Schema.union(Schema.string(), str)


class TestOrOperator:
    def test_builds_union(self):
        v = Schema.string() | Schema.number()
        assert isinstance(v, UnionValidator)
        assert isinstance(v.validate(1), Ok)

    def test_flattens(self):
        v = Schema.string() | Schema.number() | Schema.boolean()
        assert len(v.options) == 3

    def test_configured_union_is_not_flattened(self):
        inner = (Schema.string() | Schema.number()).optional()
        v = inner | Schema.boolean()
        assert len(v.options) == 2
        assert v.options[0] is inner

    def test_non_validator(self):
        with pytest.raises(TypeError):
            Schema.string() | str


class TestLiteral:
    def test_string(self):
        v = Schema.literal("hello")
        assert v.validate("hello") == Ok("hello")
        assert v.validate("world").errors == ("Value must be exactly hello",)

    def test_number(self):
        v = Schema.literal(42)
        assert isinstance(v.validate(42), Ok)
        assert isinstance(v.validate(42.0), Ok)
        assert v.validate("42").errors == ("Value must be exactly 42",)
        assert isinstance(v.validate(43), Err)

    def test_boolean(self):
        v = Schema.literal(True)
        assert isinstance(v.validate(True), Ok)
        assert v.validate(False).errors == ("Value must be exactly true",)
        assert v.validate(1).errors == ("Value must be exactly true",)

    def test_one_is_not_true(self):
        assert isinstance(Schema.literal(1).validate(True), Err)

    def test_required(self):
        assert Schema.literal("x").validate(None).errors == ("Value is required",)

    def test_invalid_literal(self):
        with pytest.raises(TypeError):
            Schema.literal([1])

    def test_union_of_literals(self):
        status = Schema.union(
            Schema.literal("pending"), Schema.literal("approved"), Schema.literal("rejected")
        )
        assert isinstance(status.validate("approved"), Ok)
        assert status.validate("unknown").errors == (
            "Value does not match any of the allowed types",
        )

    def test_enum(self):
        v = Schema.enum("a", 1, False)
        assert isinstance(v.validate("a"), Ok)
        assert isinstance(v.validate(1), Ok)
        assert isinstance(v.validate(False), Ok)
        assert isinstance(v.validate(0), Err)

    def test_empty_enum_rejected(self):
        with pytest.raises(ValueError):
            Schema.enum()


class TestLogging:
    def test_union_exhaustion_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="schemakit.algebraic"):
            Schema.union(Schema.string()).validate(1)
        assert "No union alternative matched" in caplog.text

    def test_unexpected_keys_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="schemakit.composites"):
            Schema.object({}).strict().validate({"x": 1})
        assert "Rejected unexpected keys" in caplog.text
