"""
Integration tests for the FastAPI item analysis server.

Uses httpx.AsyncClient + ASGITransport for in-process HTTP round-trips.
"""

import math

import pytest
from httpx import ASGITransport, AsyncClient

from item_analysis.api.app import create_app
from item_analysis.api.config import ApiSettings
from item_analysis.core.data import response_matrix_to_csv
from item_analysis.synthetic_data import (
    GenerationConfig,
    generate_rasch_responses,
)

SMALL_SETTINGS = ApiSettings(
    max_students=5000,
    max_items=500,
    max_csv_bytes=2_000_000,
)

WORKED_EXAMPLE = [[1, 1, 0], [1, 0, 0], [0, 1, 1], [1, 1, 1]]

WORKED_EXAMPLE_CSV = """student,Q1,Q2,Q3
Alice,1,1,0
Bob,1,0,0
Cara,0,1,1
Dan,1,1,1
"""


def _make_client(settings: ApiSettings = SMALL_SETTINGS) -> AsyncClient:
    app = create_app(settings=settings)
    transport = ASGITransport(app=app)
    return AsyncClient(transport=transport, base_url="http://testserver")


class TestHealthCheck:
    @pytest.mark.asyncio
    async def test_health(self) -> None:
        async with _make_client() as client:
            resp = await client.get("/api/v1/health")
            assert resp.status_code == 200
            data = resp.json()
            assert data["status"] == "ok"
            assert data["version"] == "0.1.0"


class TestMatrixAnalysis:
    @pytest.mark.asyncio
    async def test_worked_example(self) -> None:
        async with _make_client() as client:
            resp = await client.post(
                "/api/v1/analysis",
                json={"response_matrix": WORKED_EXAMPLE},
            )
            assert resp.status_code == 200
            data = resp.json()
            assert data["n_students"] == 4
            assert data["n_items"] == 3
            assert [item["difficulty"] for item in data["items"]] == (
                pytest.approx([0.75, 0.75, 0.5])
            )
            assert data["total_scores"] == [2.0, 1.0, 2.0, 3.0]
            agg = data["aggregate"]
            assert agg["mean"] == pytest.approx(2.0)
            assert agg["standard_deviation"] == pytest.approx(
                math.sqrt(2 / 3)
            )
            assert 0.0 <= agg["cronbach_alpha"] <= 1.0
            assert data["reliability_band"] == "poor"
            assert data["flagged_items"] == ["Item_1"]

    @pytest.mark.asyncio
    async def test_ragged_matrix_rejected(self) -> None:
        async with _make_client() as client:
            resp = await client.post(
                "/api/v1/analysis",
                json={"response_matrix": [[1, 0], [1], [0, 1]]},
            )
            assert resp.status_code == 422
            data = resp.json()
            assert data["code"] == "VALIDATION_ERROR"
            assert "Inconsistent" in data["message"]

    @pytest.mark.asyncio
    async def test_oversized_matrix_rejected(self) -> None:
        settings = ApiSettings(max_students=3)
        async with _make_client(settings) as client:
            resp = await client.post(
                "/api/v1/analysis",
                json={"response_matrix": WORKED_EXAMPLE},
            )
            assert resp.status_code == 422
            assert resp.json()["code"] == "DATA_SIZE_EXCEEDED"


class TestCsvAnalysis:
    @pytest.mark.asyncio
    async def test_worked_example(self) -> None:
        async with _make_client() as client:
            resp = await client.post(
                "/api/v1/analysis/csv",
                json={
                    "csv_text": WORKED_EXAMPLE_CSV,
                    "file_name": "quiz.csv",
                },
            )
            assert resp.status_code == 200
            data = resp.json()
            assert [item["item_id"] for item in data["items"]] == [
                "Q1",
                "Q2",
                "Q3",
            ]
            assert data["flagged_items"] == ["Q1"]

    @pytest.mark.asyncio
    async def test_synthetic_exam(self) -> None:
        generated = generate_rasch_responses(
            GenerationConfig(n_students=120, n_items=20, random_seed=3)
        )
        csv_text = response_matrix_to_csv(generated.response_matrix)
        async with _make_client() as client:
            resp = await client.post(
                "/api/v1/analysis/csv", json={"csv_text": csv_text}
            )
            assert resp.status_code == 200
            data = resp.json()
            assert data["n_students"] == 120
            assert data["n_items"] == 20
            assert len(data["total_scores"]) == 120

    @pytest.mark.asyncio
    async def test_header_only_rejected(self) -> None:
        async with _make_client() as client:
            resp = await client.post(
                "/api/v1/analysis/csv",
                json={"csv_text": "student,Q1,Q2\n"},
            )
            assert resp.status_code == 422
            assert resp.json()["code"] == "PARSE_ERROR"

    @pytest.mark.asyncio
    async def test_two_students_rejected(self) -> None:
        async with _make_client() as client:
            resp = await client.post(
                "/api/v1/analysis/csv",
                json={"csv_text": "student,Q1,Q2\nA,1,0\nB,0,1\n"},
            )
            assert resp.status_code == 422
            data = resp.json()
            assert data["code"] == "PARSE_ERROR"
            assert "Need at least 3 students" in data["message"]

    @pytest.mark.asyncio
    async def test_csv_size_limit(self) -> None:
        settings = ApiSettings(max_csv_bytes=10)
        async with _make_client(settings) as client:
            resp = await client.post(
                "/api/v1/analysis/csv",
                json={"csv_text": WORKED_EXAMPLE_CSV},
            )
            assert resp.status_code == 422
            assert resp.json()["code"] == "DATA_SIZE_EXCEEDED"


class TestRequestId:
    @pytest.mark.asyncio
    async def test_generated(self) -> None:
        async with _make_client() as client:
            resp = await client.get("/api/v1/health")
            assert len(resp.headers["X-Request-ID"]) == 12

    @pytest.mark.asyncio
    async def test_echoed_in_header_and_error(self) -> None:
        async with _make_client() as client:
            resp = await client.post(
                "/api/v1/analysis/csv",
                json={"csv_text": "student,Q1,Q2\n"},
                headers={"X-Request-ID": "req-123"},
            )
            assert resp.headers["X-Request-ID"] == "req-123"
            assert resp.json()["request_id"] == "req-123"
