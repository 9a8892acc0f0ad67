"""Tests for recipelab.schemas.

Tests ConfigMap ordering and value handling, StepInfo validation and
StepSchema completeness.
"""

import pytest

from recipelab.schemas import (
    CodeInfo,
    ConfigMap,
    StepInfo,
    StepSchema,
    default_info,
    same_code_info,
    to_float32,
)


class TestConfigMap:
    """Tests for ConfigMap."""

    def test_iteration_is_lexicographic(self):
        config = ConfigMap()
        config.set("zeta", 1)
        config.set("alpha", 2)
        config.set("mid", 3)

        assert list(config) == ["alpha", "mid", "zeta"]
        assert [k for k, _ in config.items()] == ["alpha", "mid", "zeta"]

    def test_order_independent_of_insertion(self):
        first = ConfigMap({"b": 1, "a": 2, "c": 3})
        second = ConfigMap({"c": 3, "a": 2, "b": 1})
        assert first.items() == second.items()
        assert first == second

    def test_key_appears_once(self):
        config = ConfigMap()
        config.set("cnt", 1)
        config.set("cnt", 5)
        assert len(config) == 1
        assert config["cnt"] == 5.0

    def test_values_stored_as_float32(self):
        config = ConfigMap({"x": 0.1})
        assert config["x"] == to_float32(0.1)
        assert config["x"] != 0.1

    def test_exact_values_survive(self):
        config = ConfigMap({"ref": 45})
        assert config["ref"] == 45.0
        assert isinstance(config["ref"], float)

    def test_get_value_casts_to_default_type(self):
        config = ConfigMap({"cnt": 10})
        value = config.get_value("cnt", 0)
        assert value == 10
        assert isinstance(value, int)
        assert config.get_value("cnt", 0.0) == 10.0

    def test_get_value_missing_returns_default(self):
        assert ConfigMap().get_value("missing", 7) == 7

    def test_rejects_non_string_key(self):
        with pytest.raises(TypeError):
            ConfigMap().set(3, 1.0)

    def test_rejects_non_numeric_value(self):
        with pytest.raises(TypeError):
            ConfigMap().set("x", "1.0")
        with pytest.raises(TypeError):
            ConfigMap().set("x", True)

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_rejects_non_finite_value(self, value):
        config = ConfigMap()
        with pytest.raises(ValueError, match="must be finite"):
            config.set("ref", value)
        assert "ref" not in config

    @pytest.mark.parametrize("value", [1e300, 10**400])
    def test_rejects_out_of_range_value(self, value):
        with pytest.raises(ValueError, match="out of float32 range"):
            ConfigMap().set("ref", value)

    def test_empty_is_falsy(self):
        assert not ConfigMap()
        assert ConfigMap({"a": 1})


class TestStepInfo:
    """Tests for StepInfo validation."""

    def test_defaults(self):
        info = StepInfo()
        assert info.always_same_code is False
        assert info.returns_stop is False
        assert info.stop_variable is None

    def test_returns_stop_requires_variable(self):
        with pytest.raises(ValueError, match="stop_variable is required"):
            StepInfo(returns_stop=True)

    def test_variable_requires_returns_stop(self):
        with pytest.raises(ValueError, match="only valid"):
            StepInfo(stop_variable="ok")

    def test_helpers(self):
        assert same_code_info().always_same_code is True
        assert default_info() == StepInfo()


class TestStepSchema:
    """Tests for StepSchema.is_valid."""

    @staticmethod
    def _emit(config):
        return [], CodeInfo()

    def test_complete_schema_is_valid(self):
        schema = StepSchema("ok", same_code_info, lambda c, m: True, self._emit)
        assert schema.is_valid()
        assert schema.info().always_same_code is True

    @pytest.mark.parametrize("field", ["name", "describe", "execute", "emit"])
    def test_missing_field_is_invalid(self, field):
        values = {
            "name": "step",
            "describe": same_code_info,
            "execute": lambda c, m: True,
            "emit": self._emit,
        }
        values[field] = "" if field == "name" else None
        assert not StepSchema(**values).is_valid()

    def test_schema_is_immutable(self):
        schema = StepSchema("ok", same_code_info, lambda c, m: True, self._emit)
        with pytest.raises(AttributeError):
            schema.name = "other"
