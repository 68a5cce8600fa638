"""Tests for the HTTP API."""

import time

import anyio
import httpx
import pytest
from fastapi.testclient import TestClient

from expensehedge.api.main import app
from expensehedge.api.schemas.request import ConsolationQuoteRequest
from expensehedge.api.services.hedge_service import HedgeService
from expensehedge.config import get_settings
from expensehedge.services.economics import calculate_emotional_hedging


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def expense_payload():
    return {
        "baseline_expense": 100,
        "adverse_expense": 300,
        "event_probability": 0.2,
        "months": 12,
    }


class TestHealth:

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestHedgeEndpoints:

    def test_quote(self, client):
        response = client.post(
            "/api/hedge/quote",
            json={
                "baseline_expense": 100,
                "adverse_expense": 120,
                "event_probability": 0.35,
                "hedge_ratio": 0.8,
                "fee_rate": 0.02,
                "months": 3,
            },
        )

        assert response.status_code == 200
        body = response.json()
        assert body["quote"]["shares"] == pytest.approx(16.3265, abs=1e-3)
        assert body["total_premium"] == pytest.approx(3 * body["quote"]["premium"])

    def test_quote_uses_configured_fee(self, client):
        response = client.post(
            "/api/hedge/quote",
            json={"baseline_expense": 100, "adverse_expense": 200, "event_probability": 0.5, "hedge_ratio": 1},
        )

        assert response.status_code == 200
        assert response.json()["quote"]["shares"] == pytest.approx(100 / 0.99)

    def test_invalid_scenario_is_rejected(self, client):
        response = client.post(
            "/api/hedge/quote",
            json={"baseline_expense": 300, "adverse_expense": 100, "event_probability": 0.2},
        )

        assert response.status_code == 422

    def test_hedge_ratio_out_of_range(self, client, expense_payload):
        response = client.post("/api/hedge/quote", json={**expense_payload, "hedge_ratio": 1.5})

        assert response.status_code == 422

    def test_simulate(self, client, expense_payload):
        response = client.post("/api/hedge/simulate", json={**expense_payload, "runs": 200, "seed": 4})

        assert response.status_code == 200
        body = response.json()
        assert 0 <= body["hedged_better"] <= 1
        assert sum(b["hedged_count"] for b in body["histogram"]) == 200

    def test_simulate_is_reproducible_with_seed(self, client, expense_payload):
        payload = {**expense_payload, "runs": 100, "seed": 9}

        first = client.post("/api/hedge/simulate", json=payload).json()
        second = client.post("/api/hedge/simulate", json=payload).json()

        assert first == second

    def test_optimize(self, client, expense_payload):
        response = client.post("/api/hedge/optimize", json={**expense_payload, "steps": 4, "runs": 100, "seed": 1})

        assert response.status_code == 200
        body = response.json()
        assert len(body["candidates"]) == 5
        assert 0 <= body["optimal_ratio"] <= 1


class TestConsolationEndpoints:

    def test_quote(self, client):
        response = client.post(
            "/api/consolation/quote",
            json={"entry_cost": 50, "desired_consolation": 100, "event_probability": 0.4, "runs": 100, "seed": 3},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["quote"]["unhedged_outcome_if_adverse_event"] == -50
        assert body["report"]["unhedged_stats"]["mean"] == -50

    def test_optimize(self, client):
        response = client.post(
            "/api/consolation/optimize",
            json={"entry_cost": 50, "desired_consolation": 100, "event_probability": 0.4, "runs": 50, "seed": 3},
        )

        assert response.status_code == 200
        assert len(response.json()["candidates"]) == 19


class TestSimulationLimits:

    def test_optimization_over_draw_budget_is_rejected(self, client, expense_payload):
        payload = {**expense_payload, "months": 600, "runs": 100_000, "steps": 200}

        response = client.post("/api/hedge/optimize", json=payload)

        assert response.status_code == 422

    def test_simulation_over_draw_budget_is_rejected(self, client, expense_payload):
        payload = {**expense_payload, "months": 600, "runs": 100_000}

        response = client.post("/api/hedge/simulate", json=payload)

        assert response.status_code == 422

    def test_health_responds_while_optimizing(self, expense_payload):
        """A long sweep runs in the threadpool and must not block the event loop."""
        payload = {**expense_payload, "months": 12, "runs": 20000, "steps": 20, "seed": 1}

        async def health_during_optimization():
            transport = httpx.ASGITransport(app=app)
            async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
                optimize_responses = []

                async def optimize():
                    optimize_responses.append(await client.post("/api/hedge/optimize", json=payload))

                async with anyio.create_task_group() as tg:
                    tg.start_soon(optimize)
                    start = time.perf_counter()
                    await anyio.sleep(0.1)
                    health = await client.get("/health")
                    latency = time.perf_counter() - start
                    optimize_finished = bool(optimize_responses)

            return health, latency, optimize_finished, optimize_responses[0]

        health, latency, optimize_finished, optimized = anyio.run(health_during_optimization)

        assert health.status_code == 200
        assert latency < 0.6
        assert not optimize_finished
        assert optimized.status_code == 200


class TestHedgeService:

    def test_consolation_quote_matches_report(self):
        request = ConsolationQuoteRequest(
            entry_cost=50, desired_consolation=100, event_probability=0.4, fee_rate=0.02, runs=50, seed=5
        )

        result = HedgeService(get_settings()).consolation(request)

        assert result.quote == calculate_emotional_hedging(50, 100, 1.0, 0.4, 0.02)
        assert result.quote == result.report.quote
