"""
Shared pytest fixtures for the dq test suite.

This module provides:
- A seeded random generator for the random helpers
- A factory for Settings objects patched into the modules that read them
- A helper for asserting pydantic validation failures on the value types
"""

import random

import pytest
from typing import Any, Type
from pydantic import BaseModel, ValidationError

from dq.core.config import Settings


@pytest.fixture
def seeded_rng():
    """Deterministic random generator."""
    return random.Random(20240611)


@pytest.fixture
def settings_factory(monkeypatch):
    """Factory installing a Settings instance as the library's current settings."""
    def _factory(**overrides: Any) -> Settings:
        """Build Settings with overrides and patch every get_settings lookup."""
        custom = Settings(**overrides)
        monkeypatch.setattr("dq.math.arithmetic.get_settings", lambda: custom)
        monkeypatch.setattr("dq.display.expressions.get_settings", lambda: custom)
        return custom
    return _factory


@pytest.fixture
def assert_validation_error():
    """Helper to assert that a ValidationError is raised with expected details."""
    def _assert_validation(
        model_class: Type[BaseModel],
        data: dict[str, Any],
        expected_field: str | None = None,
    ) -> ValidationError:
        """
        Assert that creating a model raises ValidationError.

        Args:
            model_class: The Pydantic model class
            data: Invalid data to pass to model
            expected_field: Expected field name in error (optional)

        Returns:
            The ValidationError that was raised
        """
        with pytest.raises(ValidationError) as exc_info:
            model_class(**data)

        error = exc_info.value
        if expected_field:
            field_errors = [e for e in error.errors() if e['loc'] and e['loc'][0] == expected_field]
            assert len(field_errors) > 0, f"Expected error for field '{expected_field}' not found"

        return error

    return _assert_validation

