import pytest

from param_normalizer.domain.validate import check_required
from param_normalizer.domain.values import MISSING
from tests.param_scenario_factory import ParamScenarioFactory as F


def _errors(param_type, processed, required=True):
    return check_required(processed, F.specs(F.single(param_type, required=required)))


EMPTY = "Required property 'x' is empty or has no value"
NOT_FOUND = "Required property 'x' hasn't found in params"


class TestCheckRequired:
    @pytest.mark.parametrize("param_type", ["string", "number", "boolean", "array", "object"])
    def test_missing_field(self, param_type):
        assert _errors(param_type, {}) == [NOT_FOUND]

    @pytest.mark.parametrize("param_type", ["string", "number", "boolean", "array", "object"])
    def test_optional_fields_skipped(self, param_type):
        assert _errors(param_type, {}, required=False) == []
        assert _errors(param_type, {"x": None}, required=False) == []

    def test_follows_schema_order(self):
        specs = F.specs(
            {
                "b": {"type": "string", "required": True},
                "a": {"type": "array", "required": True},
                "c": {"type": "number", "required": False},
            }
        )
        assert check_required({"a": []}, specs) == [
            "Required property 'b' hasn't found in params",
            "Required property 'a' is empty or has no value",
        ]

    @pytest.mark.parametrize(
        "param_type,value,expected",
        [
            ("string", "abc", []),
            ("string", "", [EMPTY]),
            ("string", None, [EMPTY]),
            ("number", 0, []),
            ("number", 0.0, []),
            ("number", 12.5, []),
            ("number", float("nan"), [EMPTY]),
            ("number", float("inf"), [EMPTY]),
            ("number", "12", [EMPTY]),
            ("boolean", False, []),
            ("boolean", True, []),
            ("boolean", "", []),
            ("boolean", None, [EMPTY]),
            ("boolean", MISSING, [EMPTY]),
            ("array", [0], []),
            ("array", [], [EMPTY]),
            ("array", None, [EMPTY]),
            ("object", {"k": None}, []),
            ("object", {}, [EMPTY]),
            ("object", None, [EMPTY]),
            ("object", MISSING, [EMPTY]),
        ],
    )
    def test_present_values(self, param_type, value, expected):
        assert _errors(param_type, {"x": value}) == expected
