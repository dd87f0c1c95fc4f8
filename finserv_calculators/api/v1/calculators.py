"""POST /v1/emi, /v1/emi/moratorium, /v1/term-insurance, /v1/amortization"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException, Request

from finserv_calculators.api.v1.schemas import (
    AmortizationRequest,
    AmortizationResponse,
    AmortizationRowSchema,
    EMIRequest,
    EMIResponse,
    MoratoriumRequest,
    MoratoriumResponse,
    TermInsuranceRequest,
    TermInsuranceResponse,
)
from finserv_calculators.api.dependencies import get_moratorium_policy, get_request_id
from finserv_calculators.config import settings
from finserv_calculators.domain.amortization import generate_amortization_schedule
from finserv_calculators.domain.emi import calculate_emi, compute_emi
from finserv_calculators.domain.exceptions import InvalidInputError
from finserv_calculators.domain.insurance import calculate_term_premium
from finserv_calculators.domain.models import (
    LoanParameters,
    MoratoriumParameters,
    MoratoriumPolicy,
    TermInsuranceParameters,
)
from finserv_calculators.domain.moratorium import calculate_moratorium
from finserv_calculators.infrastructure.observability.logging import log_calculation
from finserv_calculators.infrastructure.observability.metrics import record_calculation, record_invalid_input
from finserv_calculators.utils.currency import format_inr

router = APIRouter()


def reject_invalid_input(calculator: str, request_id: str, error: InvalidInputError) -> HTTPException:
    """Translate a domain validation failure into a 422"""
    record_invalid_input(calculator, error.field)
    logging.warning(f"Invalid input: {error}", extra={"request_id": request_id, "calculator": calculator})
    return HTTPException(status_code=422, detail={"field": error.field, "message": error.message})


@router.post("/emi", response_model=EMIResponse)
def emi(request_body: EMIRequest, request: Request):
    """Standard reducing-balance EMI with total payable and total interest"""
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        result = calculate_emi(
            LoanParameters(
                principal=request_body.principal,
                annual_rate_percent=request_body.annual_rate_percent,
                tenure_months=request_body.tenure_months,
            )
        )
    except InvalidInputError as e:
        raise reject_invalid_input("emi", request_id, e)

    record_calculation("emi")
    log_calculation(request_id, "emi", (time.time() - start_time) * 1000, emi=result.emi)

    return EMIResponse(
        emi=result.emi,
        total_payable=result.total_payable,
        total_interest=result.total_interest,
        emi_display=format_inr(result.emi),
        total_payable_display=format_inr(result.total_payable),
        total_interest_display=format_inr(result.total_interest),
    )


@router.post("/emi/moratorium", response_model=MoratoriumResponse)
def moratorium_emi(
    request_body: MoratoriumRequest,
    request: Request,
    policy: MoratoriumPolicy = Depends(get_moratorium_policy),
):
    """
    Compare the regular EMI with the EMI after a moratorium.

    Whether a moratorium covering the whole tenure is clamped or rejected is
    governed by the MORATORIUM_POLICY setting.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        result = calculate_moratorium(
            MoratoriumParameters(
                principal=request_body.principal,
                annual_rate_percent=request_body.annual_rate_percent,
                tenure_months=request_body.tenure_months,
                moratorium_months=request_body.moratorium_months,
            ),
            policy,
        )
    except InvalidInputError as e:
        raise reject_invalid_input("moratorium", request_id, e)

    record_calculation("moratorium")
    log_calculation(
        request_id,
        "moratorium",
        (time.time() - start_time) * 1000,
        moratorium_emi=result.moratorium_emi,
        extra_cost=result.extra_cost,
    )

    return MoratoriumResponse(
        regular_emi=result.regular_emi,
        moratorium_emi=result.moratorium_emi,
        extra_cost=result.extra_cost,
        compounded_principal=result.compounded_principal,
        remaining_tenure_months=result.remaining_tenure_months,
        policy=policy.value,
    )


@router.post("/term-insurance", response_model=TermInsuranceResponse)
def term_insurance(request_body: TermInsuranceRequest, request: Request):
    """Indicative term insurance premium from age, cover and term bands"""
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        result = calculate_term_premium(
            TermInsuranceParameters(
                age=request_body.age,
                cover_amount=request_body.cover_amount,
                term_years=request_body.term_years,
            )
        )
    except InvalidInputError as e:
        raise reject_invalid_input("term_insurance", request_id, e)

    record_calculation("term_insurance")
    log_calculation(
        request_id, "term_insurance", (time.time() - start_time) * 1000, annual_premium=result.annual_premium
    )

    return TermInsuranceResponse(
        annual_premium=result.annual_premium,
        monthly_premium=result.monthly_premium,
        total_premium=result.total_premium,
    )


@router.post("/amortization", response_model=AmortizationResponse)
def amortization(request_body: AmortizationRequest, request: Request):
    """Month-by-month schedule; tenure is capped because the response grows with it"""
    start_time = time.time()
    request_id = get_request_id(request)

    if request_body.tenure_months > settings.max_schedule_months:
        raise HTTPException(
            status_code=422,
            detail={
                "field": "tenure_months",
                "message": f"schedules are limited to {settings.max_schedule_months} months",
            },
        )

    try:
        emi_amount = compute_emi(
            request_body.principal,
            request_body.annual_rate_percent,
            request_body.tenure_months,
        )
        rows = generate_amortization_schedule(
            request_body.principal,
            request_body.annual_rate_percent,
            request_body.tenure_months,
        )
    except InvalidInputError as e:
        raise reject_invalid_input("amortization", request_id, e)

    record_calculation("amortization")
    log_calculation(request_id, "amortization", (time.time() - start_time) * 1000, months=len(rows))

    return AmortizationResponse(
        emi=emi_amount,
        total_interest=round(sum(row.interest for row in rows), 2),
        schedule=[
            AmortizationRowSchema(
                month=row.month,
                payment=row.payment,
                interest=row.interest,
                principal=row.principal,
                closing_balance=row.closing_balance,
            )
            for row in rows
        ],
    )
