"""Salary breakdown table: turns a ``TaxResult`` into display rows.

No financial computation happens here beyond splitting each annual amount
into a per-month figure; the toggles only decide which rows appear.
"""

from __future__ import annotations

from typing import List

from salary_tax.config import settings
from salary_tax.models.schemas import Breakdown, BreakdownRow, RowType, TaxResult
from salary_tax.utils.helpers import format_currency, format_lpa

_DESCRIPTIONS: dict[tuple[bool, bool], str] = {
    # (employer_pf_included, gratuity_included)
    (False, False): "Breakdown with Employer PF included in CTC (12% of Basic Pay)",
    (False, True): "Breakdown with Gratuity included in CTC (4.81% of Basic Pay)",
    (True, False): (
        "Breakdown with both Employer PF and Employee PF included in CTC "
        "(24% of Basic Pay)"
    ),
    (True, True): (
        "Breakdown with both Employer PF and Employee PF included in CTC "
        "(24% of Basic Pay) and Gratuity included in CTC (4.81% of Basic Pay)"
    ),
}


def describe_breakdown(employer_pf_included: bool, gratuity_included: bool) -> str:
    return _DESCRIPTIONS[(bool(employer_pf_included), bool(gratuity_included))]


def _row(
    label: str,
    value: float,
    row_type: RowType,
    highlighted: bool = False,
    final: bool = False,
) -> BreakdownRow:
    per_month = value / settings.MONTHS_PER_YEAR
    return BreakdownRow(
        label=label,
        value=value,
        perMonth=per_month,
        formattedValue=format_currency(value),
        formattedPerMonth=format_currency(per_month),
        formattedLpa=format_lpa(value),
        isHighlighted=highlighted,
        isFinal=final,
        type=row_type,
    )


def build_breakdown_rows(
    result: TaxResult,
    gratuity_included: bool = False,
    employer_pf_included: bool = False,
) -> List[BreakdownRow]:
    """Ordered table rows: base, PF, gratuity, net, tax, in-hand."""
    rows: List[BreakdownRow] = [
        _row("Gross Salary", result.grossSalary, "salary", highlighted=True),
        _row(
            "Taxable Income (Gross Salary - Standard Deduction)",
            result.taxableIncome,
            "taxable",
        ),
        _row("Basic Pay", result.basicPay, "salary", highlighted=True),
    ]

    # Employer PF row shows employeePF; the two are always equal.
    if employer_pf_included:
        rows += [
            _row("Employee PF Deduction (6%)", result.employeePF, "deduction"),
            _row("Employer PF Deduction (6%)", result.employeePF, "deduction"),
            _row("Total PF Deduction (12%)", result.employeePF * 2, "deduction"),
        ]
    else:
        rows.append(_row("Employee PF Deduction (6%)", result.employeePF, "deduction"))

    if gratuity_included:
        rows.append(_row("Gratuity Deduction (4.81%)", result.gratuityAmount, "deduction"))

    rows += [
        _row("Net Salary (After Deductions)", result.netSalary, "salary", highlighted=True),
        _row("Income Tax", result.incomeTax, "tax"),
        _row("Health & Education CESS (4%)", result.cess, "tax"),
        _row("Professional Tax", result.professionalTax, "tax"),
        _row("Total Tax", result.totalTax, "tax", highlighted=True),
        _row(
            "In-hand Salary Per Year",
            result.inHandSalary,
            "salary",
            highlighted=True,
            final=True,
        ),
    ]
    return rows


def build_breakdown(
    result: TaxResult,
    gratuity_included: bool = False,
    employer_pf_included: bool = False,
) -> Breakdown:
    """Description plus rows for the salary breakdown table.

    Raises ``ValueError`` if any amount in *result* is not finite, since
    such a value cannot be formatted as rupees.
    """
    return Breakdown(
        description=describe_breakdown(employer_pf_included, gratuity_included),
        rows=build_breakdown_rows(result, gratuity_included, employer_pf_included),
    )
