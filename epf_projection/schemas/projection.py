"""Data contracts for the savings projection."""

from __future__ import annotations

import math
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

_TRUTHY_STRINGS = {"true", "1", "yes", "on"}


def coerce_number(value: Any) -> float:
    """Turn anything into a finite float, falling back to 0."""
    if isinstance(value, bool) or value is None:
        return 0.0
    try:
        number = float(value.strip() if isinstance(value, str) else value)
    except (TypeError, ValueError, OverflowError):
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return number


def coerce_years(value: Any) -> int:
    """Truncate the horizon to a whole number of years; invalid or negative -> 0."""
    return max(0, math.trunc(coerce_number(value)))


def coerce_flag(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY_STRINGS
    if isinstance(value, (int, float)):
        return coerce_number(value) != 0
    return False


class ProjectionInput(BaseModel):
    """Parameters for one projection run.

    Every field accepts raw user input; values that are missing or not numbers
    degrade to 0 instead of failing validation.
    """

    model_config = ConfigDict(frozen=True)

    initialBalance: float = 0.0
    annualYieldPercent: float = 0.0
    monthlyContribution: float = 0.0
    annualWithdrawalPercent: float = 0.0
    years: int = 0
    inflationAdjusted: bool = False

    @field_validator(
        "initialBalance",
        "annualYieldPercent",
        "monthlyContribution",
        "annualWithdrawalPercent",
        mode="before",
    )
    @classmethod
    def _coerce_amount(cls, value: Any) -> float:
        return coerce_number(value)

    @field_validator("years", mode="before")
    @classmethod
    def _coerce_years(cls, value: Any) -> int:
        return coerce_years(value)

    @field_validator("inflationAdjusted", mode="before")
    @classmethod
    def _coerce_flag(cls, value: Any) -> bool:
        return coerce_flag(value)


class YearRecord(BaseModel):
    """Single row of the projection table."""

    model_config = ConfigDict(frozen=True)

    year: int = Field(..., ge=1)
    # opening is discounted to the start of the year, closing to the end of it
    openingBalance: float = 0.0
    contribution: float = 0.0
    interest: float = 0.0
    withdrawal: float = 0.0
    closingBalance: float = 0.0
    rawBalance: float = 0.0

    @field_validator(
        "openingBalance",
        "contribution",
        "interest",
        "withdrawal",
        "closingBalance",
        "rawBalance",
        mode="before",
    )
    @classmethod
    def _finite_amount(cls, value: Any) -> float:
        # amounts past float range would otherwise serialize as NaN/Infinity
        return coerce_number(value)


class Summary(BaseModel):
    model_config = ConfigDict(frozen=True)

    totalInvested: float = 0.0
    totalInterest: float = 0.0
    totalWithdrawn: float = 0.0
    finalAmount: float = 0.0
    millionaireYear: Optional[int] = None

    @field_validator("totalInvested", "totalInterest", "totalWithdrawn", "finalAmount", mode="before")
    @classmethod
    def _finite_total(cls, value: Any) -> float:
        return coerce_number(value)


class ProjectionResponse(BaseModel):
    """Everything the frontend needs to draw the table, chart and summary cards."""

    input: ProjectionInput
    records: List[YearRecord]
    summary: Summary


class ResetValues(BaseModel):
    initialBalance: float
    annualYieldPercent: float
    monthlyContribution: float
    annualWithdrawalPercent: float
    years: int


class DefaultsResponse(BaseModel):
    defaults: ProjectionInput
    reset: ResetValues
