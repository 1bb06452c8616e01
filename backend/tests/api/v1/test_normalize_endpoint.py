from unittest.mock import patch

from param_normalizer.domain.schema import ParamResult, ValidationResult
from tests.param_scenario_factory import ParamScenarioFactory as F


class TestNormalizeAPI:
    def test_normalize_api_valid(self, client):
        r = client.post(
            "/v1/normalize", json={"params": F.widget(), "schema": F.product_schema()}
        )

        assert r.status_code == 200
        assert r.json() == {
            "processed": {"name": "Widget", "price": 19.99},
            "validated": {"status": True, "errors": []},
        }

    def test_normalize_api_invalid_params_still_200(self, client):
        r = client.post(
            "/v1/normalize",
            json={"params": {"active": "maybe"}, "schema": F.single("boolean", name="active")},
        )
        data = r.json()

        assert r.status_code == 200
        assert data["processed"] == {}
        assert data["validated"]["status"] is False
        assert data["validated"]["errors"][-1] == (
            "Param property 'active' must be a type of boolean"
        )

    def test_normalize_api_params_default_to_empty(self, client):
        r = client.post("/v1/normalize", json={"schema": F.product_schema()})

        assert r.status_code == 200
        assert r.json()["validated"]["errors"] == [
            "Required property 'name' hasn't found in params",
            "Required property 'price' hasn't found in params",
        ]

    def test_normalize_api_delegates_to_process_params(self, client):
        import param_normalizer.api.v1.normalize as normalize_mod

        canned = ParamResult(
            processed={"k": "v"}, validated=ValidationResult(errors=[])
        )
        with patch.object(normalize_mod, "process_params", return_value=canned) as fake:
            r = client.post("/v1/normalize", json={"params": {"k": 1}, "schema": {}})

        assert r.status_code == 200
        assert r.json()["processed"] == {"k": "v"}
        fake.assert_called_once_with({"k": 1}, {})

    def test_normalize_api_schema_invalid_returns_422(self, client):
        r = client.post(
            "/v1/normalize",
            json={"params": {}, "schema": {"x": {"type": "date", "required": True}}},
        )
        assert r.status_code == 422
