"""Integration tests for the CCI calculator HTTP API.

Requests go through the full FastAPI stack (validation, dependency
injection, serialisation) via an in-process ASGI transport.
"""

import pytest
from httpx import AsyncClient

from cci_calculator.main import app
from cci_calculator.settings import Settings, get_settings

API = "/api/v1/cci"


def _full_marks_inputs() -> list[dict]:
    inputs = [{"id": i, "numerator": 10, "denominator": 10} for i in range(1, 24)]
    inputs[11] = {"id": 12, "numerator": 0, "denominator": 10}
    return inputs


class TestHealth:
    @pytest.mark.asyncio()
    async def test_health(self, api_client: AsyncClient) -> None:
        response = await api_client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"


class TestCatalogEndpoints:
    """GET /cci/parameters and /cci/parameters/{id}."""

    @pytest.mark.asyncio()
    async def test_list_parameters(self, api_client: AsyncClient) -> None:
        response = await api_client.get(f"{API}/parameters")

        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 23
        assert body["total_weightage"] == 100
        assert body["duplicate_measure_ids"] == {"DE.CM.S5": [2, 6], "PR.AA.S10": [12, 14]}
        assert body["parameters"][18]["target"] == 50

    @pytest.mark.asyncio()
    async def test_get_parameter(self, api_client: AsyncClient) -> None:
        response = await api_client.get(f"{API}/parameters/2")

        assert response.status_code == 200
        body = response.json()
        assert body["measure_id"] == "DE.CM.S5"
        assert body["weightage"] == 18

    @pytest.mark.asyncio()
    async def test_get_unknown_parameter_returns_404(self, api_client: AsyncClient) -> None:
        response = await api_client.get(f"{API}/parameters/99")
        assert response.status_code == 404

    @pytest.mark.asyncio()
    async def test_maturity_levels(self, api_client: AsyncClient) -> None:
        response = await api_client.get(f"{API}/maturity-levels")

        assert response.status_code == 200
        bands = response.json()["bands"]
        assert len(bands) == 6
        assert bands[0]["level"] == "Exceptional"
        assert bands[0]["min_score"] == 91
        assert bands[-1]["level"] == "Fail"


class TestCalculateEndpoint:
    """POST /cci/calculate."""

    @pytest.mark.asyncio()
    async def test_full_marks(self, api_client: AsyncClient) -> None:
        response = await api_client.post(
            f"{API}/calculate",
            json={"organization": "Acme Broking", "parameters": _full_marks_inputs()},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["total_score"] == pytest.approx(100.0)
        assert body["maturity_level"] == "Exceptional"
        assert body["organization"] == "Acme Broking"
        assert len(body["domain_scores"]) == 6
        assert body["improvement_areas"] == []

    @pytest.mark.asyncio()
    async def test_empty_body_uses_defaults(self, api_client: AsyncClient) -> None:
        response = await api_client.post(f"{API}/calculate", json={})

        assert response.status_code == 200
        body = response.json()
        assert body["total_score"] == pytest.approx(1.0)
        assert body["maturity_level"] == "Fail"
        assert len(body["parameters"]) == 23
        assert len(body["warnings"]) == 2

    @pytest.mark.asyncio()
    async def test_unknown_parameter_id_returns_422(self, api_client: AsyncClient) -> None:
        response = await api_client.post(
            f"{API}/calculate",
            json={"parameters": [{"id": 24, "numerator": 1, "denominator": 1}]},
        )

        assert response.status_code == 422
        assert "Parameter 24 not found" in response.json()["detail"]

    @pytest.mark.asyncio()
    async def test_negative_input_returns_422(self, api_client: AsyncClient) -> None:
        response = await api_client.post(
            f"{API}/calculate",
            json={"parameters": [{"id": 1, "numerator": -1, "denominator": 10}]},
        )
        assert response.status_code == 422

    @pytest.mark.asyncio()
    async def test_improvement_area_limit_from_settings(self, api_client: AsyncClient) -> None:
        app.dependency_overrides[get_settings] = lambda: Settings(improvement_area_limit=2)

        response = await api_client.post(f"{API}/calculate", json={})

        assert response.status_code == 200
        assert len(response.json()["improvement_areas"]) == 2


class TestNonFiniteInputs:
    """Non-finite JSON numbers are rejected before scoring."""

    @pytest.mark.asyncio()
    async def test_calculate_rejects_infinity(self, api_client: AsyncClient) -> None:
        response = await api_client.post(
            f"{API}/calculate",
            content='{"parameters":[{"id":1,"numerator":Infinity,"denominator":Infinity}]}',
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 422

    @pytest.mark.asyncio()
    async def test_calculate_rejects_nan(self, api_client: AsyncClient) -> None:
        response = await api_client.post(
            f"{API}/calculate",
            content='{"parameters":[{"id":1,"numerator":1,"denominator":NaN}]}',
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 422

    @pytest.mark.asyncio()
    async def test_score_rejects_infinity(self, api_client: AsyncClient) -> None:
        response = await api_client.post(
            f"{API}/score",
            content='{"numerator":Infinity,"denominator":Infinity}',
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 422

    @pytest.mark.asyncio()
    async def test_score_rejects_infinite_weightage(self, api_client: AsyncClient) -> None:
        response = await api_client.post(
            f"{API}/score",
            content='{"numerator":1,"denominator":2,"weightage":Infinity}',
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 422


class TestScoreEndpoint:
    """POST /cci/score."""

    @pytest.mark.asyncio()
    async def test_score_half_coverage(self, api_client: AsyncClient) -> None:
        response = await api_client.post(
            f"{API}/score",
            json={"numerator": 30, "denominator": 100, "target": 50, "weightage": 9},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["score"] == pytest.approx(60.0)
        assert body["weighted_score"] == pytest.approx(5.4)

    @pytest.mark.asyncio()
    async def test_unsupported_target_returns_422(self, api_client: AsyncClient) -> None:
        response = await api_client.post(
            f"{API}/score",
            json={"numerator": 1, "denominator": 2, "target": 75},
        )
        assert response.status_code == 422


class TestSampleEndpoint:
    """GET /cci/sample."""

    @pytest.mark.asyncio()
    async def test_seeded_sample_is_reproducible(self, api_client: AsyncClient) -> None:
        first = await api_client.get(f"{API}/sample", params={"seed": 5})
        second = await api_client.get(f"{API}/sample", params={"seed": 5})

        assert first.status_code == 200
        assert first.json()["total_score"] == second.json()["total_score"]
        assert [p["numerator"] for p in first.json()["parameters"]] == [
            p["numerator"] for p in second.json()["parameters"]
        ]


class TestReportEndpoint:
    """POST /cci/report."""

    @pytest.mark.asyncio()
    async def test_report_sections(self, api_client: AsyncClient) -> None:
        response = await api_client.post(
            f"{API}/report",
            json={"organization": "Acme Broking", "parameters": _full_marks_inputs()},
        )

        assert response.status_code == 200
        content = response.json()["content"]
        assert content["organization"] == "Acme Broking"
        assert content["sections"]["executive_summary"]["compliance_status"] == "Compliant"
        assert "parameter_details" in content["sections"]

    @pytest.mark.asyncio()
    async def test_report_without_parameter_details(self, api_client: AsyncClient) -> None:
        response = await api_client.post(
            f"{API}/report",
            params={"include_parameters": "false"},
            json={},
        )

        assert response.status_code == 200
        assert "parameter_details" not in response.json()["content"]["sections"]
