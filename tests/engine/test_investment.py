from decimal import Decimal

from canmortgage.engine.investment import calculate_investment_metrics
from canmortgage.models.planning import MonthlyExpenses


class TestInvestmentMetrics:
    def test_positive_cash_flow(self):
        result = calculate_investment_metrics(
            home_price=Decimal("500000"),
            down_payment=Decimal("100000"),
            monthly_payment=Decimal("2400"),
            monthly_rent=Decimal("3500"),
            expenses=MonthlyExpenses(
                taxes=Decimal("300"),
                insurance=Decimal("100"),
                condo_fees=Decimal("200"),
                maintenance=Decimal("100"),
            ),
        )
        assert result.total_monthly_expenses == Decimal("3100.00")
        assert result.monthly_cash_flow == Decimal("400.00")
        assert result.net_operating_income == Decimal("33600.00")
        assert result.cap_rate == Decimal("6.72")
        assert result.roi == Decimal("4.80")
        assert result.break_even_rent == Decimal("3100.00")

    def test_negative_cash_flow(self):
        result = calculate_investment_metrics(500000, 100000, 3000, 2500, MonthlyExpenses())
        assert result.monthly_cash_flow == Decimal("-500.00")
        assert result.roi == Decimal("-6.00")

    def test_no_down_payment(self):
        result = calculate_investment_metrics(500000, 0, 2400, 3500, MonthlyExpenses())
        assert result.roi == Decimal("0.00")
