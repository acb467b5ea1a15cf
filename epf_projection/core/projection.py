"""Year-by-year savings projection with contributions, yield, withdrawals and inflation."""

from __future__ import annotations

from typing import List, Optional, Tuple

from epf_projection.schemas.projection import ProjectionInput, Summary, YearRecord

INFLATION_RATE = 0.025
MILLIONAIRE_THRESHOLD = 1_000_000
MAX_YEARS = 1000

# starting values of the calculator and what its reset button restores
DEFAULT_INPUT = ProjectionInput(
    initialBalance=1000.0,
    annualYieldPercent=6.0,
    monthlyContribution=0.0,
    annualWithdrawalPercent=0.0,
    years=50,
    inflationAdjusted=False,
)
RESET_VALUES = {
    "initialBalance": 0.0,
    "annualYieldPercent": 0.0,
    "monthlyContribution": 0.0,
    "annualWithdrawalPercent": 0.0,
    "years": 50,
}


def discount_factor(year: int, inflation_adjusted: bool) -> float:
    """Multiplier that converts a nominal amount at the end of `year` into today's money."""
    if not inflation_adjusted:
        return 1.0
    return (1.0 / (1.0 + INFLATION_RATE)) ** year


def effective_years(inp: ProjectionInput, max_years: Optional[int] = None) -> int:
    limit = MAX_YEARS if max_years is None else max(0, min(max_years, MAX_YEARS))
    return min(max(inp.years, 0), limit)


def project(
    inp: ProjectionInput,
    max_years: Optional[int] = None,
) -> Tuple[List[YearRecord], Summary]:
    """
    Build the projection table and its summary.

    Order of operations (per year):
      1) Skip dormant years (nothing saved, nothing added) but keep their row.
      2) Contributions are spread over the year, so they earn half a year of yield.
      3) Withdrawal is a share of the year-end balance, never more than all of it.
      4) Record opening in start-of-year money and closing in end-of-year money.

    The carried balance is always nominal; discounting only affects what is shown.
    """
    years = effective_years(inp, max_years)
    rate = inp.annualYieldPercent / 100
    monthly = inp.monthlyContribution
    withdrawal_rate = inp.annualWithdrawalPercent / 100

    balance = inp.initialBalance
    total_contributed = inp.initialBalance
    total_withdrawn = 0.0
    millionaire_year: Optional[int] = None

    records: List[YearRecord] = []
    for year in range(1, years + 1):
        opening = balance

        if opening <= 0 and monthly == 0:
            records.append(YearRecord(year=year))
            continue

        annual_contribution = monthly * 12
        interest = opening * rate
        if monthly > 0:
            interest += annual_contribution * rate * 0.5

        pre_withdrawal = opening + annual_contribution + interest

        withdrawal = pre_withdrawal * withdrawal_rate if withdrawal_rate > 0 else 0.0
        if withdrawal > pre_withdrawal:
            withdrawal = pre_withdrawal

        closing = pre_withdrawal - withdrawal
        closing_display = closing * discount_factor(year, inp.inflationAdjusted)

        if millionaire_year is None and closing_display >= MILLIONAIRE_THRESHOLD:
            millionaire_year = year

        records.append(
            YearRecord(
                year=year,
                openingBalance=opening * discount_factor(year - 1, inp.inflationAdjusted),
                contribution=annual_contribution,
                interest=interest,
                withdrawal=withdrawal,
                closingBalance=closing_display,
                rawBalance=closing,
            )
        )

        balance = closing
        total_contributed += annual_contribution
        total_withdrawn += withdrawal

    if years == 0:
        return records, Summary()

    summary = Summary(
        totalInvested=total_contributed,
        # balancing figure, not the sum of the per-year interest column
        totalInterest=(balance + total_withdrawn) - total_contributed,
        totalWithdrawn=total_withdrawn,
        finalAmount=balance * discount_factor(years, inp.inflationAdjusted),
        millionaireYear=millionaire_year,
    )
    return records, summary


__all__ = [
    "DEFAULT_INPUT",
    "INFLATION_RATE",
    "MAX_YEARS",
    "MILLIONAIRE_THRESHOLD",
    "RESET_VALUES",
    "discount_factor",
    "effective_years",
    "project",
]
