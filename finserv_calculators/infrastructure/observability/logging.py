"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from pythonjsonlogger import jsonlogger

from finserv_calculators.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_calculation(request_id: str, calculator: str, duration_ms: float, **fields: Any) -> None:
    """Log one calculator invocation with its headline figures"""
    logging.info(
        "Calculation completed",
        extra={
            "request_id": request_id,
            "step": "calculation_complete",
            "calculator": calculator,
            "duration_ms": duration_ms,
            **fields,
        },
    )


def log_eligibility(
    request_id: str,
    employment_type: str,
    eligible_loan_amount: float,
    error_reason: Optional[str],
    duration_ms: float,
) -> None:
    """Log structured eligibility outcome for funnel analysis"""
    logging.info(
        "Eligibility completed",
        extra={
            "request_id": request_id,
            "step": "eligibility_complete",
            "employment_type": employment_type,
            "eligibility_outcome": error_reason or "eligible",
            "eligible_loan_amount": round(eligible_loan_amount),
            "duration_ms": duration_ms,
        },
    )
