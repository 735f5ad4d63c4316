from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from canmortgage.api.app import app


@pytest.fixture
def client():
    return TestClient(app)


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


class TestCalculate:
    def test_canonical(self, client):
        resp = client.post("/api/v1/calculate", json={
            "home_price": 500000,
            "down_payment": 100000,
            "interest_rate": 5.25,
            "amortization_years": 25,
        })
        assert resp.status_code == 200
        data = resp.json()
        assert Decimal(data["payment"]["periodic_payment"]) == Decimal("2396.99")
        assert data["payment"]["bi_weekly_payment"] is None
        assert len(data["schedule"]) == 25
        assert Decimal(data["schedule"][-1]["balance"]) == 0
        assert Decimal(data["closing_costs"]["total"]) == Decimal("16350.00")
        assert data["mortgage_insurance"]["is_required"] is False
        assert data["record"]["province"] == "ontario"

    def test_bi_weekly(self, client):
        resp = client.post("/api/v1/calculate", json={
            "home_price": 500000,
            "down_payment": 100000,
            "interest_rate": 5.25,
            "amortization_years": 25,
            "payment_frequency": "bi-weekly",
            "include_closing_costs": False,
        })
        data = resp.json()
        assert Decimal(data["payment"]["bi_weekly_payment"]) == Decimal("1198.50")
        assert data["closing_costs"] is None

    @pytest.mark.parametrize("override", [
        {"down_payment": 600000},
        {"home_price": 0},
        {"interest_rate": -1},
        {"amortization_years": 0},
        {"payment_frequency": "weekly"},
        {"city": "vancouver"},
        {"province": "quebec"},
    ])
    def test_invalid_input_is_400(self, client, override):
        payload = {
            "home_price": 500000,
            "down_payment": 100000,
            "interest_rate": 5.25,
            "amortization_years": 25,
            **override,
        }
        resp = client.post("/api/v1/calculate", json=payload)
        assert resp.status_code == 400
        assert resp.json()["detail"]


class TestComponentRoutes:
    def test_payment(self, client):
        resp = client.post("/api/v1/payment", json={
            "home_price": 500000, "down_payment": 100000, "interest_rate": 7, "amortization_years": 30,
        })
        assert Decimal(resp.json()["monthly_payment"]) == Decimal("2661.21")

    def test_schedule(self, client):
        resp = client.post("/api/v1/schedule", json={
            "loan_amount": "360000", "monthly_payment": "1000", "monthly_rate": "0", "amortization_years": 30,
        })
        rows = resp.json()
        assert len(rows) == 30
        assert Decimal(rows[0]["principal_payment"]) == Decimal("12000")

    def test_schedule_degenerate(self, client):
        resp = client.post("/api/v1/schedule", json={
            "loan_amount": "400000", "monthly_payment": "100", "monthly_rate": "0.004375", "amortization_years": 25,
        })
        assert resp.status_code == 400

    @pytest.mark.parametrize("path,body", [
        ("/api/v1/schedule", {"loan_amount": "400000", "monthly_payment": "2400", "monthly_rate": "0.004375"}),
        ("/api/v1/payment", {"home_price": 500000, "down_payment": 100000, "interest_rate": 5}),
    ])
    def test_unbounded_term_rejected(self, client, path, body):
        resp = client.post(path, json={**body, "amortization_years": 10**7})
        assert resp.status_code == 422

    def test_closing_costs(self, client):
        resp = client.post("/api/v1/closing-costs", json={
            "home_price": 500000, "province": "bc", "city": "vancouver", "is_first_time_buyer": True,
        })
        data = resp.json()
        assert Decimal(data["provincial_rebate"]) == Decimal("8000")
        assert Decimal(data["total"]) == Decimal("4150")


class TestPlanningRoutes:
    def test_affordability(self, client):
        resp = client.post("/api/v1/affordability", json={
            "annual_income": 120000, "monthly_debts": 500, "down_payment": 50000, "interest_rate": 5,
        })
        assert resp.status_code == 200
        assert Decimal(resp.json()["max_affordable_price"]) == Decimal("597392")

    def test_affordability_invalid(self, client):
        resp = client.post("/api/v1/affordability", json={
            "annual_income": 0, "down_payment": 50000, "interest_rate": 5,
        })
        assert resp.status_code == 400

    def test_rent_vs_buy(self, client):
        resp = client.post("/api/v1/rent-vs-buy", json={
            "monthly_rent": 2000, "annual_rent_increase": 0, "comparison_years": 2,
            "down_payment": 100000, "monthly_payment": 2500,
        })
        data = resp.json()
        assert Decimal(data["net_benefit"]) == Decimal("-112000")
        assert len(data["yearly_comparison"]) == 2

    def test_investment(self, client):
        resp = client.post("/api/v1/investment", json={
            "home_price": 500000, "down_payment": 100000, "monthly_payment": 2400, "monthly_rent": 3500,
            "monthly_expenses": {"taxes": 300, "insurance": 100, "condo_fees": 200, "maintenance": 100},
        })
        data = resp.json()
        assert Decimal(data["cap_rate"]) == Decimal("6.72")
        assert Decimal(data["monthly_cash_flow"]) == Decimal("400")
