"""Indian salary tax calculation (new-regime slabs, hardcoded).

Tax Slabs (on income after the ₹75,000 standard deduction):
    ₹0 – ₹4,00,000            → 0 %
    ₹4,00,001 – ₹8,00,000     → 5 %
    ₹8,00,001 – ₹12,00,000    → 10 %
    ₹12,00,001 – ₹16,00,000   → 15 %
    ₹16,00,001 – ₹20,00,000   → 20 %
    ₹20,00,001 – ₹24,00,000   → 25 %
    Above ₹24,00,000           → 30 %

Cess is 4 % of the slab tax and professional tax is a flat ₹200 a month.
PF and gratuity reduce the salary that reaches the employee but are not
subtracted from taxable income.
"""

from __future__ import annotations

import logging
import math

from salary_tax.config import settings
from salary_tax.models.schemas import TaxResult

logger = logging.getLogger(__name__)

# Slab boundaries and marginal rates; income below the first lower bound is untaxed
_SLABS: list[tuple[float, float, float]] = [
    # (lower_bound, upper_bound, marginal_rate)
    (400_000.0,   800_000.0,   0.05),
    (800_000.0,   1_200_000.0, 0.10),
    (1_200_000.0, 1_600_000.0, 0.15),
    (1_600_000.0, 2_000_000.0, 0.20),
    (2_000_000.0, 2_400_000.0, 0.25),
    (2_400_000.0, float("inf"), 0.30),
]


def calculate_income_tax(taxable_income: float) -> float:
    """Slab tax on *taxable_income*, before cess. Not rounded."""
    return sum(
        rate * max(min(taxable_income, upper) - lower, 0.0)
        for lower, upper, rate in _SLABS
    )


def calculate_tax(
    gross_salary: float,
    basic_pay_percentage: float,
    employer_pf_included: bool = False,
    consider_gratuity: bool = False,
) -> TaxResult:
    """Compute the full salary tax breakdown.

    Parameters
    ----------
    gross_salary:
        Annual gross salary (CTC) in INR.
    basic_pay_percentage:
        Basic pay as a percentage of gross. Anything below 50 is treated
        as 50.
    employer_pf_included:
        When true the employer's PF contribution is also deducted from CTC.
        It never changes the value of ``employerPF`` itself.
    consider_gratuity:
        When true a gratuity accrual of 4.81 % of basic is deducted.

    Returns
    -------
    TaxResult
        Every field populated and unrounded. Inputs are not validated, so
        negative or non-finite values flow straight through the arithmetic.
    """
    # Computed value first so that NaN is returned rather than the bound
    effective_basic_pct = max(basic_pay_percentage, settings.MIN_BASIC_PAY_PERCENT)
    basic_pay = gross_salary * (effective_basic_pct / 100)

    employee_pf = basic_pay * settings.PF_RATE
    employer_pf = basic_pay * settings.PF_RATE

    gratuity_amount = basic_pay * settings.GRATUITY_RATE if consider_gratuity else 0.0

    total_pf_deduction = employee_pf + employer_pf if employer_pf_included else employee_pf

    net_salary = gross_salary - gratuity_amount - total_pf_deduction

    taxable_income = max(gross_salary - settings.STANDARD_DEDUCTION, 0.0)

    income_tax = calculate_income_tax(taxable_income)
    cess = income_tax * settings.CESS_RATE
    professional_tax = settings.MONTHS_PER_YEAR * settings.PROFESSIONAL_TAX_MONTHLY
    total_tax = income_tax + cess + professional_tax

    total_deductions = gratuity_amount + total_pf_deduction

    in_hand_salary = net_salary - total_tax
    in_hand_salary_per_month = in_hand_salary / settings.MONTHS_PER_YEAR

    logger.debug(
        "gross=%s basic%%=%s employer_pf=%s gratuity=%s -> tax=%s in_hand=%s",
        gross_salary, effective_basic_pct, employer_pf_included,
        consider_gratuity, total_tax, in_hand_salary,
    )

    return TaxResult(
        grossSalary=gross_salary,
        basicPay=basic_pay,
        standardDeduction=settings.STANDARD_DEDUCTION,
        taxableIncome=taxable_income,
        incomeTax=income_tax,
        cess=cess,
        totalTax=total_tax,
        netSalary=net_salary,
        employeePF=employee_pf,
        employerPF=employer_pf,
        gratuityAmount=gratuity_amount,
        professionalTax=professional_tax,
        totalDeductions=total_deductions,
        inHandSalary=in_hand_salary,
        inHandSalaryPerMonth=in_hand_salary_per_month,
    )


def validate_tax_inputs(gross_salary: float, basic_pay_percentage: float) -> None:
    """Reject inputs the calculator would happily turn into nonsense.

    Raises ``ValueError`` for a negative or non-finite gross salary, or a
    non-finite basic-pay percentage.
    """
    if not math.isfinite(gross_salary):
        raise ValueError(f"grossSalary must be a finite number, got {gross_salary!r}")
    if gross_salary < 0:
        raise ValueError(f"grossSalary cannot be negative, got {gross_salary}")
    if not math.isfinite(basic_pay_percentage):
        raise ValueError(
            f"basicPayPercentage must be a finite number, got {basic_pay_percentage!r}"
        )


def validate_tax_result(result: TaxResult) -> None:
    """Reject a result whose arithmetic overflowed.

    Finite inputs can still multiply past the float range (a huge gross
    with a huge basic percentage), which JSON would serialise as ``null``.
    """
    for name, value in result.model_dump().items():
        if not math.isfinite(value):
            raise ValueError(f"{name} is out of range for these inputs, got {value!r}")
