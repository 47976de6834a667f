"""Pydantic request / response schemas for all API endpoints.

Field names are camelCase so that the JSON contract matches the names the
salary breakdown table reads (``grossSalary``, ``inHandSalary`` …).
"""

from __future__ import annotations
from typing import List, Literal
from pydantic import BaseModel, ConfigDict, Field

RowType = Literal["salary", "taxable", "deduction", "tax"]

# ── 1. Tax calculation  (/tax:calculate) ──────────────────────────────────

class TaxRequest(BaseModel):
    """Salary inputs and the two CTC toggles."""
    grossSalary: float = Field(..., description="Gross annual salary (CTC) in INR")
    basicPayPercentage: float = Field(
        50.0, description="Basic pay as % of gross; values below 50 are raised to 50",
    )
    employerPfIncluded: bool = Field(
        False, description="Deduct employer PF as well as employee PF from CTC",
    )
    considerGratuity: bool = Field(
        False, description="Deduct the 4.81% gratuity accrual from CTC",
    )

class TaxResult(BaseModel):
    """Complete, unrounded salary tax breakdown for one set of inputs."""
    model_config = ConfigDict(frozen=True)

    grossSalary: float
    basicPay: float
    standardDeduction: float
    taxableIncome: float = Field(..., description="max(0, gross − standard deduction)")
    incomeTax: float = Field(..., description="Slab tax before cess")
    cess: float = Field(..., description="4% health & education cess on income tax")
    totalTax: float = Field(..., description="Income tax + cess + professional tax")
    netSalary: float = Field(..., description="Gross minus PF and gratuity")
    employeePF: float
    employerPF: float
    gratuityAmount: float
    professionalTax: float
    totalDeductions: float = Field(..., description="PF deducted from CTC plus gratuity")
    inHandSalary: float = Field(..., description="Net salary minus total tax, per year")
    inHandSalaryPerMonth: float

# ── 2. Salary breakdown table  (/tax:breakdown) ──────────────────────────

class BreakdownRow(BaseModel):
    """One line of the salary breakdown table."""
    label: str
    value: float = Field(..., description="Annual amount")
    perMonth: float = Field(..., description="value / 12")
    formattedValue: str = Field(..., description="Annual amount, e.g. ₹10,71,000")
    formattedPerMonth: str
    formattedLpa: str = Field(..., description="Annual amount in lakhs, e.g. ₹10.71 LPA")
    isHighlighted: bool = False
    isFinal: bool = False
    type: RowType

class Breakdown(BaseModel):
    description: str = Field(..., description="Which CTC components were deducted")
    rows: List[BreakdownRow]

class BreakdownResponse(Breakdown):
    result: TaxResult

# ── 3. Performance Report  (/performance) ────────────────────────────────

class PerformanceResponse(BaseModel):
    time: str = Field(..., description="Uptime or last response time (HH:mm:ss.SSS)")
    memory: str = Field(..., description="Current memory usage (e.g. '123.45 MB')")
    threads: int = Field(..., description="Number of active threads")
