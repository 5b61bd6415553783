from datetime import date, datetime

import pytest

from fiscalcost.allocation.breakdown import (
    calculate_costs,
    compute_cost_breakdown,
    compute_cost_summary,
    monthly_total,
    months_in_rental,
    period_cost,
)
from fiscalcost.allocation.entities import CostBreakdown, CostInput


def _office_lease(**overrides):
    terms = dict(
        monthly_rent=3000,
        rental_start=date(2024, 1, 1),
        rental_end=date(2024, 12, 31),
        security_deposit=1200,
        amortization_period_months=12,
    )
    terms.update(overrides)
    return CostInput(**terms)


def test_full_breakdown_for_office_lease():
    result = compute_cost_breakdown(
        monthly_rent=3000,
        rental_start=date(2024, 1, 1),
        rental_end=date(2024, 12, 31),
        security_deposit=1200,
        amortization_period_months=12,
        reference_date=date(2024, 5, 15),
    )
    assert result == CostBreakdown(
        daily=100.0,
        weekly=700.0,
        monthly=3100.0,
        quarterly=9300.0,
        half_yearly=18600.0,
        # Jan-Mar 2025 fall after the rental end
        fiscal_year=27900.0,
    )


@pytest.mark.parametrize(
    "rent, deposit, period, expected",
    [
        (3000, 1200, 12, 3100.0),
        (3000, 500, 0, 3000.0),
        (3000, 500, -6, 3000.0),
        (3000, 0, 12, 3000.0),
        (3000, -50, 12, 3000.0),
    ],
)
def test_monthly_total_guards(rent, deposit, period, expected):
    assert monthly_total(rent, deposit, period) == expected


def test_zero_amortization_period_leaves_rent_unchanged():
    result = calculate_costs(
        _office_lease(security_deposit=500, amortization_period_months=0),
        reference_date=date(2024, 5, 15),
    )
    assert result.monthly == 3000.0
    assert result.quarterly == 9000.0


def test_daily_uses_actual_month_length():
    lease = _office_lease(monthly_rent=3100, security_deposit=0)
    feb = calculate_costs(lease, date(2023, 2, 10))
    assert feb.daily == 110.71
    # weekly is derived from the unrounded daily figure
    assert feb.weekly == 775.0
    assert calculate_costs(_office_lease(monthly_rent=2900, security_deposit=0), date(2024, 2, 10)).daily == 100.0


def test_each_field_rounded_on_its_own():
    lease = _office_lease(monthly_rent=1000, security_deposit=100, amortization_period_months=3)
    result = calculate_costs(lease, date(2024, 4, 10))
    assert result.monthly == 1033.33
    assert result.daily == 34.44
    assert result.weekly == 241.11
    assert result.quarterly == 3100.0


def test_period_totals_zero_when_rental_ended_before_quarter():
    lease = _office_lease(rental_start=date(2023, 1, 1), rental_end=date(2024, 3, 31))
    result = calculate_costs(lease, date(2024, 5, 15))
    assert result.quarterly == 0.0
    assert result.half_yearly == 0.0
    assert result.fiscal_year == 0.0
    assert result.monthly == 3100.0


def test_rental_starting_after_current_quarter():
    lease = _office_lease(
        monthly_rent=1000,
        security_deposit=0,
        rental_start=date(2024, 7, 1),
        rental_end=date(2025, 6, 30),
    )
    result = calculate_costs(lease, date(2024, 5, 15))
    assert result.quarterly == 0.0
    assert result.half_yearly == 3000.0
    assert result.fiscal_year == 9000.0


def test_months_counted_by_their_first_day():
    lease = _office_lease(
        monthly_rent=1000,
        security_deposit=0,
        rental_start=date(2024, 4, 2),
        rental_end=date(2024, 6, 2),
    )
    result = calculate_costs(lease, date(2024, 5, 15))
    # April 1 precedes the start; June 1 is inside the range
    assert result.quarterly == 2000.0
    assert result.half_yearly == 2000.0
    assert result.fiscal_year == 2000.0


def test_inverted_rental_range_yields_zero_period_totals():
    lease = _office_lease(rental_start=date(2024, 12, 31), rental_end=date(2024, 1, 1))
    result = calculate_costs(lease, date(2024, 5, 15))
    assert (result.quarterly, result.half_yearly, result.fiscal_year) == (0.0, 0.0, 0.0)
    assert result.monthly == 3100.0


def test_fourth_quarter_spans_calendar_year_end():
    lease = _office_lease(
        monthly_rent=1000,
        security_deposit=0,
        rental_start=date(2024, 1, 1),
        rental_end=date(2025, 12, 31),
    )
    result = calculate_costs(lease, date(2025, 2, 10))
    assert result.daily == 35.71
    assert result.weekly == 250.0
    assert result.quarterly == 3000.0
    assert result.half_yearly == 6000.0
    assert result.fiscal_year == 12000.0


def test_period_helpers():
    assert months_in_rental(date(2024, 4, 1), 12, date(2024, 1, 1), date(2024, 12, 31)) == 9
    assert period_cost(100.0, date(2024, 4, 1), date(2024, 6, 30), date(2024, 7, 1), date(2024, 8, 1)) == 0.0
    assert period_cost(100.0, date(2024, 4, 1), date(2024, 6, 30), date(2024, 5, 1), date(2024, 8, 1)) == 200.0


def test_repeat_calls_are_identical():
    lease = _office_lease()
    assert calculate_costs(lease, date(2024, 5, 15)) == calculate_costs(lease, date(2024, 5, 15))


def test_accepts_date_strings_and_datetimes():
    result = compute_cost_breakdown(
        3000, "2024-01-01", "20241231", 1200, 12, reference_date=datetime(2024, 5, 15, 9, 30)
    )
    assert result.quarterly == 9300.0


def test_reference_date_defaults_to_today():
    result = compute_cost_breakdown(3000, date(2000, 1, 1), date(2000, 12, 31))
    assert result.monthly == 3000.0
    assert result.quarterly == 0.0


def test_cost_summary():
    summary = compute_cost_summary(_office_lease(), date(2024, 5, 15))
    assert summary.monthly_total == 3100.0
    assert summary.position.fiscal_year == 2024
    assert summary.position.quarter == 1
    assert summary.position.half == 1
    assert summary.position.month_name == "May"
    assert summary.breakdown.fiscal_year == 27900.0
    assert summary.breakdown.as_dict()["half_yearly"] == 18600.0


def test_cost_input_coerces_values():
    lease = CostInput("3000", "2024-01-01", "2024-12-31", None, None)
    assert lease.monthly_rent == 3000.0
    assert lease.security_deposit == 0.0
    assert lease.amortization_period_months == 0
    assert lease.rental_start == date(2024, 1, 1)


def test_extreme_rent_amounts_do_not_raise():
    huge = calculate_costs(_office_lease(monthly_rent=1e27, security_deposit=0), date(2024, 5, 15))
    assert huge.monthly == 1e27
    assert huge.quarterly == 1e27 * 3

    unbounded = calculate_costs(_office_lease(monthly_rent=float("inf")), date(2024, 5, 15))
    assert unbounded.monthly == float("inf")
    assert unbounded.fiscal_year == float("inf")


def test_missing_rent_treated_as_zero():
    result = compute_cost_breakdown(None, "2024-01-01", "2024-12-31", reference_date=date(2024, 5, 15))
    assert result == CostBreakdown()


def test_negative_rent_passes_through():
    result = calculate_costs(_office_lease(monthly_rent=-100, security_deposit=0), date(2024, 4, 10))
    assert result.monthly == -100.0
    assert result.daily == -3.33
    assert result.weekly == -23.33
    assert result.quarterly == -300.0
    # ties round away from zero
    tie = calculate_costs(_office_lease(monthly_rent=-3100.155, security_deposit=0), date(2024, 4, 10))
    assert tie.monthly == -3100.16
