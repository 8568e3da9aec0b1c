"""
Tests for schemakit result types and exceptions.
"""

import pytest

from schemakit import Err, Ok, Schema, SchemaValidationError


class TestOk:
    def test_fields(self):
        result = Ok(5)
        assert result.success is True
        assert result.data == 5
        assert result.errors == ()
        assert result.is_ok()
        assert not result.is_err()

    def test_unwrap(self):
        assert Ok("x").unwrap() == "x"

    def test_none_data(self):
        assert Ok(None).data is None


class TestErr:
    def test_fields(self):
        result = Err(["a", "b"])
        assert result.success is False
        assert result.data is None
        assert result.errors == ("a", "b")
        assert result.is_err()

    def test_single_string(self):
        assert Err("only").errors == ("only",)

    def test_empty_errors_rejected(self):
        with pytest.raises(ValueError):
            Err([])

    def test_unwrap_raises(self):
        with pytest.raises(SchemaValidationError) as exc_info:
            Err(["first", "second"]).unwrap()
        assert exc_info.value.errors == ("first", "second")
        assert str(exc_info.value) == "first; second"

    def test_equality(self):
        assert Err(["x"]) == Err(("x",))


class TestParse:
    def test_parse_returns_data(self):
        assert Schema.number().parse(3) == 3

    def test_parse_raises(self):
        with pytest.raises(SchemaValidationError) as exc_info:
            Schema.number().parse("3")
        assert exc_info.value.errors == ("Value must be a number",)

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            Schema.string().parse(None)
