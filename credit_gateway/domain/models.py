"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass
from typing import Literal, Optional, Protocol

CreditRating = Literal["Excellent", "Good", "Fair", "Poor", "Very Poor"]

CREDIT_RATINGS: tuple[str, ...] = ("Excellent", "Good", "Fair", "Poor", "Very Poor")

UNAVAILABLE_MESSAGE = "Failed to get assessment from the AI model. Please try again."


@dataclass(frozen=True)
class FinancialProfile:
    """Applicant financial profile as submitted by the caller"""

    income: float
    debt: float  # excluding mortgage
    credit_utilization: float  # percent, nominally 0-100
    late_payments: int  # trailing 12 months
    credit_age: float  # years since oldest account
    num_accounts: int


@dataclass(frozen=True)
class ScoreFactors:
    """Penalties and bonuses applied to the base score"""

    utilization_penalty: float
    debt_ratio: float
    debt_penalty: float
    late_penalty: float
    age_bonus: float
    accounts_bonus: float


@dataclass(frozen=True)
class ModelAnalysis:
    """Model quality metrics reported alongside a score"""

    precision: float
    recall: float
    f1_score: float
    roc_auc: float
    model_used: str


@dataclass(frozen=True)
class AssessmentResult:
    """Output of a credit assessment"""

    credit_score: int
    credit_rating: CreditRating
    justification: str
    model_analysis: ModelAnalysis


@dataclass(frozen=True)
class AssessmentUnavailable:
    """The single failure kind of an assessment backend"""

    reason: str  # short code: missing_credentials, timeout, http_error, transport_error, invalid_payload
    detail: str = ""
    message: str = UNAVAILABLE_MESSAGE


@dataclass(frozen=True)
class AssessmentOutcome:
    """Either a result or an AssessmentUnavailable error, never both"""

    result: Optional[AssessmentResult] = None
    error: Optional[AssessmentUnavailable] = None

    @property
    def ok(self) -> bool:
        return self.result is not None

    @classmethod
    def success(cls, result: AssessmentResult) -> "AssessmentOutcome":
        return cls(result=result)

    @classmethod
    def failure(cls, reason: str, detail: str = "") -> "AssessmentOutcome":
        return cls(error=AssessmentUnavailable(reason=reason, detail=detail))


class Assessor(Protocol):
    """Backend contract shared by the simulated engine and the remote client"""

    backend: str

    async def assess(self, profile: FinancialProfile) -> AssessmentOutcome:
        ...
