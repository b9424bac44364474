"""POST /v1/assessment - credit score assessment endpoint"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException, Request

from credit_gateway.api.v1.schemas import AssessmentRequest, AssessmentResponse
from credit_gateway.api.dependencies import get_assessor, get_request_id
from credit_gateway.domain.models import Assessor
from credit_gateway.infrastructure.observability.metrics import record_assessment, record_assessment_failure
from credit_gateway.infrastructure.observability.logging import log_assessment, log_assessment_failure

router = APIRouter()


@router.post("/assessment", response_model=AssessmentResponse)
async def create_assessment(
    request_body: AssessmentRequest,
    request: Request,
    assessor: Assessor = Depends(get_assessor),
):
    """
    Assess creditworthiness of a financial profile.

    Flow:
    1. Convert the validated request into a FinancialProfile
    2. Ask the configured backend (simulated engine or Gemini)
    3. Map an unavailable outcome to 503 with a user-facing message
    4. Return score, rating, justification, and model metrics
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        outcome = await assessor.assess(request_body.to_profile())
    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    if not outcome.ok:
        error = outcome.error
        record_assessment_failure(assessor.backend, error.reason)
        log_assessment_failure(request_id, assessor.backend, f"{error.reason}: {error.detail}")
        raise HTTPException(status_code=503, detail=error.message)

    result = outcome.result
    duration_ms = (time.time() - start_time) * 1000
    record_assessment(assessor.backend, result.credit_score, result.credit_rating)
    log_assessment(request_id, assessor.backend, result.credit_score, result.credit_rating, duration_ms)

    return AssessmentResponse.from_result(result)
