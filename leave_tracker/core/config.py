import os
import logging
from pydantic import BaseModel, Field
from typing import Dict, List
from dotenv import load_dotenv

load_dotenv()


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        logging.getLogger(__name__).warning(f"Ignoring non-numeric {name}={raw!r}, using {default}")
        return default


class PayrollTolerance(BaseModel):
    # Absolute difference (in days) between payslip and computed figures
    valid: float = _env_float("PAYROLL_TOLERANCE_VALID", 0.5)
    warning: float = _env_float("PAYROLL_TOLERANCE_WARNING", 1.0)
    # Global score thresholds (percent)
    score_valid: int = 90
    score_warning: int = 70


class Config(BaseModel):
    app_name: str = "Leave Tracker"
    environment: str = os.getenv("APP_ENV", "development")
    api_prefix: str = "/api"
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Database
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./leave_tracker.db")

    version: str = "1.0.0"
    request_id_header: str = "X-Request-ID"

    # CORS: comma-separated origins loaded from env.
    cors_origins: List[str] = Field(
        default_factory=lambda: [
            o.strip()
            for o in os.getenv(
                "CORS_ORIGINS",
                "http://localhost:3000,http://127.0.0.1:3000",
            ).split(",")
            if o.strip()
        ]
    )

    # Leave accounting
    holiday_country: str = os.getenv("HOLIDAY_COUNTRY", "FR")
    default_quotas: Dict[str, float] = Field(
        default_factory=lambda: {
            "cp": _env_float("DEFAULT_QUOTA_CP", 25.0),
            "rtt": _env_float("DEFAULT_QUOTA_RTT", 23.0),
            "cet": _env_float("DEFAULT_QUOTA_CET", 5.0),
        }
    )
    payroll: PayrollTolerance = PayrollTolerance()


settings = Config()

_logger = logging.getLogger(__name__)
if settings.environment == "production" and settings.database_url.startswith("sqlite"):
    _logger.warning("⚠ Using SQLite storage in production; backups are the caller's responsibility.")
