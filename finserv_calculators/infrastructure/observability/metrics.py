"""Prometheus metrics for calculator usage, eligibility outcomes and lead flow"""

from typing import Optional

from prometheus_client import Counter, Histogram

# Calculator usage
calculation_counter = Counter(
    "finserv_calculation_total",
    "Calculator invocations",
    ["calculator"],  # emi | moratorium | term_insurance | eligibility | amortization
)

invalid_input_counter = Counter(
    "finserv_invalid_input_total",
    "Calculator requests rejected by domain validation",
    ["calculator", "field"],
)

# Eligibility metrics
eligibility_outcome_counter = Counter(
    "finserv_eligibility_total",
    "Eligibility results by outcome",
    ["outcome"],  # eligible | tenure_exceeds_retirement | no_affordability_headroom
)

eligible_amount_bucket_counter = Counter(
    "finserv_eligible_amount_bucket",
    "Eligible loan amounts by bucket",
    ["bucket"],  # 0, <10L, 10L-50L, 50L-1Cr, 1Cr+
)

# Lead submissions
submission_counter = Counter(
    "finserv_eligibility_submission_total",
    "Eligibility submissions by status transition",
    ["status"],  # pending | reviewed | contacted
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_calculation(calculator: str) -> None:
    calculation_counter.labels(calculator=calculator).inc()


def record_invalid_input(calculator: str, field: str) -> None:
    invalid_input_counter.labels(calculator=calculator, field=field).inc()


def record_eligibility(error_reason: Optional[str], eligible_loan_amount: float) -> None:
    """Record eligibility outcome and bucket the eligible amount for distribution analysis"""
    eligibility_outcome_counter.labels(outcome=error_reason or "eligible").inc()

    if eligible_loan_amount <= 0:
        bucket = "0"
    elif eligible_loan_amount < 1_000_000:
        bucket = "<10L"
    elif eligible_loan_amount < 5_000_000:
        bucket = "10L-50L"
    elif eligible_loan_amount < 10_000_000:
        bucket = "50L-1Cr"
    else:
        bucket = "1Cr+"

    eligible_amount_bucket_counter.labels(bucket=bucket).inc()


def record_submission(status: str) -> None:
    submission_counter.labels(status=status).inc()
