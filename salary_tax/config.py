"""Application configuration loaded from environment variables."""

import os
from dotenv import load_dotenv

load_dotenv()

class Settings:
    """Centralized application settings."""

    # Server
    APP_HOST: str = os.getenv("APP_HOST", "0.0.0.0")
    APP_PORT: int = int(os.getenv("APP_PORT", "5477"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Salary structure (fixed, not read from the environment)
    STANDARD_DEDUCTION: float = 75_000.0   # ₹75,000
    MIN_BASIC_PAY_PERCENT: float = 50.0    # basic is never below 50% of gross
    PF_RATE: float = 0.12                  # 12% of basic, employee and employer each
    GRATUITY_RATE: float = 0.0481          # 4.81% of basic
    CESS_RATE: float = 0.04                # health & education cess on income tax
    PROFESSIONAL_TAX_MONTHLY: float = 200.0

    MONTHS_PER_YEAR: int = 12
    LAKH: int = 100_000


settings = Settings()
