"""
Тесты для JSON Schema контракта solver_request
"""

import json

import pytest
from jsonschema import ValidationError

from bernoulli_laplace.core.contracts import (
    SchemaLoader,
    SolverRequestValidator,
    validate_solver_request,
)


@pytest.fixture
def valid_payload():
    return {
        "total": 100,
        "required": 80,
        "odds": {"numerator": 4, "denominator": 5},
        "iterations": 300,
        "sqrt_iterations": 10,
        "precision": 1000,
        "stable_amount": 5,
    }


class TestSchemaLoader:
    """Тесты SchemaLoader."""

    def test_load_schema(self):
        schema = SchemaLoader().load_schema("solver_request")
        assert schema["title"] == "SolverRequest"

    def test_schema_cached(self):
        loader = SchemaLoader()
        assert loader.load_schema("solver_request") is loader.load_schema("solver_request")

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_custom_schema_dir(self, tmp_path):
        schema = {
            "$schema": "https://json-schema.org/draft/2020-12/schema",
            "title": "Odds",
            "type": "object",
        }
        (tmp_path / "odds.json").write_text(json.dumps(schema), encoding="utf-8")
        assert SchemaLoader(tmp_path).load_schema("odds") == schema

    def test_invalid_schema_rejected(self, tmp_path):
        (tmp_path / "broken.json").write_text('{"type": 5}', encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")

    def test_missing_directory(self, tmp_path):
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "nope")


class TestSolverRequestContract:
    """Тесты валидации solver_request."""

    def test_valid_payload(self, valid_payload):
        validate_solver_request(valid_payload)

    def test_minimal_payload(self):
        validate_solver_request(
            {"total": 1, "required": 0, "odds": {"numerator": 0, "denominator": 1}}
        )

    def test_missing_odds(self, valid_payload):
        del valid_payload["odds"]
        with pytest.raises(ValidationError, match="odds"):
            validate_solver_request(valid_payload)

    def test_zero_denominator(self, valid_payload):
        valid_payload["odds"]["denominator"] = 0
        with pytest.raises(ValidationError):
            validate_solver_request(valid_payload)

    def test_negative_total(self, valid_payload):
        valid_payload["total"] = -1
        with pytest.raises(ValidationError):
            validate_solver_request(valid_payload)

    def test_non_integer_precision(self, valid_payload):
        valid_payload["precision"] = "1000"
        with pytest.raises(ValidationError):
            validate_solver_request(valid_payload)

    def test_unknown_field(self, valid_payload):
        valid_payload["mode"] = "fast"
        with pytest.raises(ValidationError):
            validate_solver_request(valid_payload)

    def test_iter_errors_collects_all(self, valid_payload):
        valid_payload["total"] = -1
        valid_payload["iterations"] = 0
        errors = list(SolverRequestValidator().iter_errors(valid_payload))
        assert len(errors) == 2

    def test_is_valid(self, valid_payload):
        validator = SolverRequestValidator()
        assert validator.is_valid(valid_payload)
        valid_payload["required"] = -3
        assert not validator.is_valid(valid_payload)
