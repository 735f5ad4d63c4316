"""Terminal report for a single mortgage calculation.

Usage:
    python -m canmortgage.cli 500000 100000 5.25
    python -m canmortgage.cli 650000 65000 4.79 --years 30 --frequency bi-weekly --city vancouver --first-time-buyer
"""

import argparse
import sys

from canmortgage.engine.calculation import CalculationResult, build_parameters, run_calculation
from canmortgage.engine.errors import InvalidInputError
from canmortgage.engine.validation import CITY_PROVINCE
from canmortgage.models.loan import City, PaymentFrequency


# ── Helpers ──────────────────────────────────────────────────────────────────

def _dollar(v) -> str:
    return f"${float(v):,.2f}"


def _header(title: str) -> None:
    print(f"\n{'=' * 64}")
    print(f"  {title}")
    print(f"{'=' * 64}")


# ── Report sections ──────────────────────────────────────────────────────────

def print_payment_summary(result: CalculationResult) -> None:
    p = result.payment
    label = "Bi-weekly" if p.payment_frequency is PaymentFrequency.BI_WEEKLY else "Monthly"
    _header("Payment Summary")
    print(f"  Loan Amount:      {_dollar(p.loan_amount)}")
    print(f"  {label + ' Payment:':<17} {_dollar(p.periodic_payment)}")
    print(f"  Total Interest:   {_dollar(p.total_interest)}")
    print(f"  Total Cost:       {_dollar(p.total_cost)}")
    ins = result.insurance
    if ins is not None and ins.is_required:
        print(f"  CMHC Premium:     {_dollar(ins.premium)} ({float(ins.rate) * 100:.1f}%)")


def print_schedule(result: CalculationResult) -> None:
    _header("Amortization Schedule")
    print(f"  {'Yr':>3}  {'Principal':>13}  {'Interest':>13}  {'Balance':>14}  {'Cum. Interest':>14}")
    print(f"  {'---':>3}  {'-' * 13}  {'-' * 13}  {'-' * 14}  {'-' * 14}")
    for row in result.schedule:
        print(
            f"  {row.year:>3}  {_dollar(row.principal_payment):>13}  "
            f"{_dollar(row.interest_payment):>13}  {_dollar(row.balance):>14}  "
            f"{_dollar(row.cumulative_interest):>14}"
        )


def print_closing_costs(result: CalculationResult) -> None:
    c = result.closing_costs
    if c is None:
        return
    _header("Closing Costs")
    print(f"  Land Transfer Tax:     {_dollar(c.land_transfer_tax)}")
    if c.additional_tax:
        print(f"  Municipal LTT:         {_dollar(c.additional_tax)}")
    print(f"  Legal Fees:            {_dollar(c.legal_fees)}")
    print(f"  Title Insurance:       {_dollar(c.title_insurance)}")
    print(f"  Home Inspection:       {_dollar(c.home_inspection)}")
    print(f"  Appraisal:             {_dollar(c.appraisal)}")
    print(f"  Survey:                {_dollar(c.survey_fee)}")
    if c.first_time_buyer_rebate:
        print(f"  First-Time Rebate:    -{_dollar(c.first_time_buyer_rebate)}")
    print(f"  Total:                 {_dollar(c.total)}")
    print(f"\n  Cash to Close:         {_dollar(result.cash_to_close)}")


# ── Main ─────────────────────────────────────────────────────────────────────

def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Canadian mortgage payment and closing cost report")
    parser.add_argument("home_price", type=str, help="Purchase price")
    parser.add_argument("down_payment", type=str, help="Down payment")
    parser.add_argument("rate", type=str, help="Annual interest rate in percent (e.g. 5.25)")
    parser.add_argument("--years", type=int, default=25, help="Amortization period (default: 25)")
    parser.add_argument(
        "--frequency",
        choices=[f.value for f in PaymentFrequency],
        default=PaymentFrequency.MONTHLY.value,
        help="Payment frequency (default: monthly)",
    )
    parser.add_argument(
        "--city",
        choices=[c.value for c in City],
        default=City.TORONTO.value,
        help="City; the province follows from it (default: toronto)",
    )
    parser.add_argument("--first-time-buyer", action="store_true", help="Apply first-time buyer rebates")
    parser.add_argument("--no-schedule", action="store_true", help="Skip the yearly schedule table")

    args = parser.parse_args(argv)
    city = City(args.city)

    try:
        params = build_parameters(
            home_price=args.home_price,
            down_payment=args.down_payment,
            annual_rate_pct=args.rate,
            amortization_years=args.years,
            payment_frequency=args.frequency,
            province=CITY_PROVINCE[city],
            city=city,
            is_first_time_buyer=args.first_time_buyer,
        )
        result = run_calculation(params)
    except InvalidInputError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    print_payment_summary(result)
    if not args.no_schedule:
        print_schedule(result)
    print_closing_costs(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
