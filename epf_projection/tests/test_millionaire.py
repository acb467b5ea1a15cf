from __future__ import annotations

from epf_projection.core.projection import MILLIONAIRE_THRESHOLD, project
from epf_projection.schemas.projection import ProjectionInput


def test_first_year_reaching_a_million_is_reported():
    records, summary = project(ProjectionInput(initialBalance=900_000.0, annualYieldPercent=5.0, years=6))

    # 945,000 -> 992,250 -> 1,041,862.5
    assert summary.millionaireYear == 3
    crossed = [row.year for row in records if row.closingBalance >= MILLIONAIRE_THRESHOLD]
    assert crossed[0] == 3
    assert len(crossed) > 1


def test_reaching_exactly_a_million_counts():
    _, summary = project(ProjectionInput(initialBalance=1_000_000.0, years=3))

    assert summary.millionaireYear == 1


def test_inflation_mode_uses_todays_money():
    _, nominal = project(ProjectionInput(initialBalance=900_000.0, annualYieldPercent=5.0, years=3))
    _, real = project(
        ProjectionInput(initialBalance=900_000.0, annualYieldPercent=5.0, years=3, inflationAdjusted=True)
    )

    assert nominal.millionaireYear == 3
    assert real.millionaireYear is None


def test_milestone_is_not_reset_when_balance_falls_back():
    records, summary = project(ProjectionInput(initialBalance=1_100_000.0, years=6, inflationAdjusted=True))

    assert records[0].closingBalance >= MILLIONAIRE_THRESHOLD
    assert records[-1].closingBalance < MILLIONAIRE_THRESHOLD
    assert summary.millionaireYear == 1


def test_milestone_is_not_moved_by_a_second_crossing():
    """
    A yield of -150% turns each year's balance into 1.5M minus half the previous one,
    so it swings above and below a million: 1.5M, 750k, 1.125M, 937.5k, 1.03125M.
    """
    records, summary = project(
        ProjectionInput(initialBalance=0.0, annualYieldPercent=-150.0, monthlyContribution=500_000.0, years=5)
    )

    assert [row.closingBalance for row in records] == [1_500_000.0, 750_000.0, 1_125_000.0, 937_500.0, 1_031_250.0]
    crossed = [row.year for row in records if row.closingBalance >= MILLIONAIRE_THRESHOLD]
    assert crossed == [1, 3, 5]
    assert summary.millionaireYear == 1
