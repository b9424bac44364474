"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from credit_gateway.config import settings
from credit_gateway.domain.models import Assessor
from credit_gateway.infrastructure.clients.gemini import GeminiClient
from credit_gateway.infrastructure.clients.simulated import SimulatedAssessor


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_assessor() -> Assessor:
    """Provide the configured assessment backend"""
    if settings.assessment_backend == "gemini":
        return GeminiClient(
            api_key=settings.gemini_api_key,
            model=settings.gemini_model,
            base_url=settings.gemini_api_base,
            timeout=settings.http_timeout_seconds,
        )
    return SimulatedAssessor(simulate_latency=settings.simulate_latency)
