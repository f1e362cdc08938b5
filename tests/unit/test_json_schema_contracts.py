"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидатора fixed_point_value:
- Валидность самой схемы
- Валидация правильных данных
- Детекция нарушений required полей, типов и constraints
- Интеграция с Pydantic моделью FixedPointValue
"""

import pytest
from jsonschema import Draft202012Validator, ValidationError

from bigfixed.core.contracts import (
    FixedPointValueValidator,
    SchemaLoader,
    validate_fixed_point_value,
)
from bigfixed.core.domain import FixedPointValue
from bigfixed.core.math.fixed_point import BigFixed


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_fixed_point_value():
    """Валидный сериализованный BigFixed."""
    return {"magnitude": "-1234567890123456789012345678901234567890", "scale": 64}


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузки схем"""

    def test_schema_is_valid_draft_2020_12(self) -> None:
        schema = SchemaLoader().load_schema("fixed_point_value")
        Draft202012Validator.check_schema(schema)

    def test_schema_cached(self) -> None:
        loader = SchemaLoader()
        assert loader.load_schema("fixed_point_value") is loader.load_schema("fixed_point_value")

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("no_such_schema")

    def test_missing_directory(self, tmp_path) -> None:
        with pytest.raises(RuntimeError):
            SchemaLoader(tmp_path / "absent")


# =============================================================================
# FIXED POINT VALUE CONTRACT
# =============================================================================


class TestFixedPointValueContract:
    """Тесты валидации fixed_point_value"""

    def test_valid_data(self, valid_fixed_point_value) -> None:
        validate_fixed_point_value(valid_fixed_point_value)
        assert FixedPointValueValidator().is_valid(valid_fixed_point_value)

    def test_missing_scale(self, valid_fixed_point_value) -> None:
        del valid_fixed_point_value["scale"]
        with pytest.raises(ValidationError):
            validate_fixed_point_value(valid_fixed_point_value)

    def test_magnitude_must_be_string(self, valid_fixed_point_value) -> None:
        valid_fixed_point_value["magnitude"] = 12
        with pytest.raises(ValidationError):
            validate_fixed_point_value(valid_fixed_point_value)

    def test_magnitude_pattern(self, valid_fixed_point_value) -> None:
        valid_fixed_point_value["magnitude"] = "1.5"
        assert not FixedPointValueValidator().is_valid(valid_fixed_point_value)

    def test_negative_scale(self, valid_fixed_point_value) -> None:
        valid_fixed_point_value["scale"] = -1
        assert not FixedPointValueValidator().is_valid(valid_fixed_point_value)

    def test_additional_properties_rejected(self, valid_fixed_point_value) -> None:
        valid_fixed_point_value["value"] = "1.0"
        assert not FixedPointValueValidator().is_valid(valid_fixed_point_value)

    def test_all_errors_reported(self) -> None:
        validator = FixedPointValueValidator().validator
        errors = list(validator.iter_errors({"magnitude": "x", "scale": -1}))
        assert len(errors) == 2

    def test_pydantic_model_matches_contract(self) -> None:
        payload = FixedPointValue.from_big_fixed(BigFixed(-3, 70)).to_contract()
        validate_fixed_point_value(payload)
        assert FixedPointValue.model_validate(payload).to_big_fixed() == BigFixed(-3, 70)
