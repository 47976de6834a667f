# Test type: Configuration
# Validation to be executed: Shared fixtures for all test modules
# Command: pytest test/ -v (this file is auto-loaded by pytest)

"""Shared pytest fixtures for the Salary Tax Breakdown API test suite."""

from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient

from salary_tax.main import app
from salary_tax.services.tax_service import calculate_tax


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
async def client():
    """Async HTTP client bound to the FastAPI app (no real server needed)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac


# ── Sample data fixtures ─────────────────────────────────────────────────

@pytest.fixture
def twelve_lakh_body():
    """₹12L CTC at the 50% basic floor, no optional deductions."""
    return {
        "grossSalary": 1_200_000,
        "basicPayPercentage": 50,
        "employerPfIncluded": False,
        "considerGratuity": False,
    }


@pytest.fixture
def twelve_lakh_result():
    """TaxResult for ₹12L CTC with both toggles off."""
    return calculate_tax(1_200_000, 50)
