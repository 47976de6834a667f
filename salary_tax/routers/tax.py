"""Routers for salary tax endpoints:
    POST  /salary/v1/tax:calculate
    POST  /salary/v1/tax:breakdown
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from salary_tax.models.schemas import (
    BreakdownResponse,
    TaxRequest,
    TaxResult,
)
from salary_tax.services.breakdown_service import build_breakdown
from salary_tax.services.tax_service import (
    calculate_tax,
    validate_tax_inputs,
    validate_tax_result,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/salary/v1",
    tags=["Tax"],
)


# ── Shared pipeline ──────────────────────────────────────────────────────

def _compute(body: TaxRequest) -> TaxResult:
    """Validate the request and run the calculator."""
    validate_tax_inputs(body.grossSalary, body.basicPayPercentage)
    result = calculate_tax(
        body.grossSalary,
        body.basicPayPercentage,
        employer_pf_included=body.employerPfIncluded,
        consider_gratuity=body.considerGratuity,
    )
    validate_tax_result(result)
    return result


# ── Calculation endpoint ─────────────────────────────────────────────────

@router.post(
    "/tax:calculate",
    response_model=TaxResult,
    summary="Calculate income tax, PF, gratuity and in-hand salary",
)
async def tax_calculate(body: TaxRequest) -> TaxResult:
    """Return every component of the salary breakdown, unrounded."""
    try:
        return _compute(body)
    except ValueError as exc:
        logger.info("Rejected tax request: %s", exc)
        raise HTTPException(status_code=422, detail=str(exc))


# ── Breakdown table endpoint ─────────────────────────────────────────────

@router.post(
    "/tax:breakdown",
    response_model=BreakdownResponse,
    summary="Salary breakdown as formatted table rows",
)
async def tax_breakdown(body: TaxRequest) -> BreakdownResponse:
    """Compute the breakdown and lay it out as table rows with rupee and
    LPA formatting.  Which PF and gratuity rows appear follows the request
    toggles.
    """
    try:
        result = _compute(body)
        breakdown = build_breakdown(
            result,
            gratuity_included=body.considerGratuity,
            employer_pf_included=body.employerPfIncluded,
        )
    except ValueError as exc:
        logger.info("Rejected breakdown request: %s", exc)
        raise HTTPException(status_code=422, detail=str(exc))

    return BreakdownResponse(
        result=result,
        description=breakdown.description,
        rows=breakdown.rows,
    )
