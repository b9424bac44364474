"""Pytest fixtures for testing"""

import pytest
from fastapi.testclient import TestClient
from credit_gateway.api.main import create_app
from credit_gateway.api.dependencies import get_assessor
from credit_gateway.domain.models import AssessmentOutcome, FinancialProfile
from credit_gateway.infrastructure.clients.simulated import SimulatedAssessor


class UnavailableAssessor:
    """Backend stub that always reports the assessment as unavailable"""

    backend = "stub"

    async def assess(self, profile: FinancialProfile) -> AssessmentOutcome:
        return AssessmentOutcome.failure("timeout", "stubbed")


@pytest.fixture
def app():
    """FastAPI app wired to the simulated backend without artificial latency"""
    app = create_app()
    app.dependency_overrides[get_assessor] = lambda: SimulatedAssessor(simulate_latency=False)
    return app


@pytest.fixture
def client(app) -> TestClient:
    """Create FastAPI test client"""
    return TestClient(app)


@pytest.fixture
def unavailable_client(app) -> TestClient:
    """Test client whose backend always fails"""
    app.dependency_overrides[get_assessor] = lambda: UnavailableAssessor()
    return TestClient(app)


@pytest.fixture
def sample_profile() -> FinancialProfile:
    """Default form profile: seed 50000 + 10000 + 30 + 0 + 104 + 35 = 60169"""
    return FinancialProfile(
        income=50000,
        debt=10000,
        credit_utilization=30,
        late_payments=0,
        credit_age=8,
        num_accounts=5,
    )
