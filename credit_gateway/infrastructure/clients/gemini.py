"""Gemini HTTP client for remote credit assessments"""

from typing import Any, Dict, Literal, Optional

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from credit_gateway.domain.exceptions import InvalidPredictionError
from credit_gateway.domain.models import (
    AssessmentOutcome,
    AssessmentResult,
    FinancialProfile,
    ModelAnalysis,
)
from credit_gateway.domain.scoring import MAX_SCORE, MIN_SCORE, score_to_rating
from credit_gateway.infrastructure.observability.metrics import remote_latency_histogram

PROMPT_TEMPLATE = """Act as an expert credit scoring model. Analyze the following financial profile and predict the applicant's credit score.

Financial profile:
- Annual income: ${income}
- Total debt (excluding mortgage): ${debt}
- Credit utilization: {credit_utilization}%
- Late payments in the last 12 months: {late_payments}
- Age of oldest credit account: {credit_age} years
- Number of open credit accounts: {num_accounts}

Return a credit score between {min_score} and {max_score}, a credit rating (Excellent, Good, Fair, Poor or Very Poor), and a one or two sentence justification naming the key factors.
Also report the evaluation metrics of the classification model you are simulating (for example a Random Forest or Gradient Boosting classifier trained on historical credit data): generate realistic values for precision, recall, F1-score and ROC-AUC between 0 and 1, and name the model."""

RESPONSE_SCHEMA: Dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "creditScore": {"type": "INTEGER"},
        "creditRating": {
            "type": "STRING",
            "enum": ["Excellent", "Good", "Fair", "Poor", "Very Poor"],
        },
        "justification": {"type": "STRING"},
        "modelAnalysis": {
            "type": "OBJECT",
            "properties": {
                "precision": {"type": "NUMBER"},
                "recall": {"type": "NUMBER"},
                "f1Score": {"type": "NUMBER"},
                "rocAuc": {"type": "NUMBER"},
                "modelUsed": {"type": "STRING"},
            },
            "required": ["precision", "recall", "f1Score", "rocAuc", "modelUsed"],
        },
    },
    "required": ["creditScore", "creditRating", "justification", "modelAnalysis"],
}


class RemoteModelAnalysis(BaseModel):
    """modelAnalysis block of a Gemini prediction"""

    model_config = ConfigDict(strict=True, protected_namespaces=())

    precision: float = Field(..., ge=0, le=1)
    recall: float = Field(..., ge=0, le=1)
    f1_score: float = Field(..., alias="f1Score", ge=0, le=1)
    roc_auc: float = Field(..., alias="rocAuc", ge=0, le=1)
    model_used: str = Field(..., alias="modelUsed", min_length=1)


class RemotePrediction(BaseModel):
    """JSON prediction returned in the Gemini candidate text"""

    model_config = ConfigDict(strict=True, protected_namespaces=())

    credit_score: int = Field(..., alias="creditScore")
    credit_rating: Literal["Excellent", "Good", "Fair", "Poor", "Very Poor"] = Field(..., alias="creditRating")
    justification: str = Field(..., min_length=1)
    model_analysis: RemoteModelAnalysis = Field(..., alias="modelAnalysis")


def build_prompt(profile: FinancialProfile) -> str:
    """Render the assessment prompt for a profile"""
    return PROMPT_TEMPLATE.format(
        income=profile.income,
        debt=profile.debt,
        credit_utilization=profile.credit_utilization,
        late_payments=profile.late_payments,
        credit_age=profile.credit_age,
        num_accounts=profile.num_accounts,
        min_score=MIN_SCORE,
        max_score=MAX_SCORE,
    )


def parse_prediction(body: Any) -> AssessmentResult:
    """
    Extract and schema-check the prediction from a generateContent response.

    The score is clamped into [300, 850] and the rating re-derived from it,
    so remote results keep the same score/rating invariant as local ones.

    Raises:
        InvalidPredictionError: On missing candidate text or any missing or
            mis-typed prediction field
    """
    try:
        text = body["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError) as e:
        raise InvalidPredictionError("Gemini response carried no candidate text") from e

    if not isinstance(text, str):
        raise InvalidPredictionError("Gemini candidate text is not a string")

    try:
        prediction = RemotePrediction.model_validate_json(text)
    except ValidationError as e:
        raise InvalidPredictionError(f"Prediction failed schema check ({e.error_count()} errors)") from e

    credit_score = max(MIN_SCORE, min(MAX_SCORE, prediction.credit_score))
    analysis = prediction.model_analysis

    return AssessmentResult(
        credit_score=credit_score,
        credit_rating=score_to_rating(credit_score),
        justification=prediction.justification,
        model_analysis=ModelAnalysis(
            precision=analysis.precision,
            recall=analysis.recall,
            f1_score=analysis.f1_score,
            roc_auc=analysis.roc_auc,
            model_used=analysis.model_used,
        ),
    )


class GeminiClient:
    """Client for the Gemini generateContent API"""

    backend = "gemini"

    def __init__(
        self,
        api_key: Optional[str],
        model: str,
        base_url: str,
        timeout: float,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    def build_request(self, profile: FinancialProfile) -> Dict[str, Any]:
        """generateContent request body asking for a JSON prediction"""
        return {
            "contents": [{"role": "user", "parts": [{"text": build_prompt(profile)}]}],
            "generationConfig": {
                "responseMimeType": "application/json",
                "responseSchema": RESPONSE_SCHEMA,
            },
        }

    async def assess(self, profile: FinancialProfile) -> AssessmentOutcome:
        """
        Ask Gemini for an assessment of a profile.

        Never raises and never retries. Missing credentials, timeouts, HTTP
        errors, and malformed payloads all come back as a failure outcome.
        """
        if not self.api_key:
            return AssessmentOutcome.failure("missing_credentials", "Gemini API key is not configured")

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            try:
                with remote_latency_histogram.time():
                    response = await client.post(
                        f"{self.base_url}/models/{self.model}:generateContent",
                        headers={"x-goog-api-key": self.api_key},
                        json=self.build_request(profile),
                    )
                response.raise_for_status()
                result = parse_prediction(response.json())

            except httpx.TimeoutException:
                return AssessmentOutcome.failure("timeout", f"Gemini API timeout after {self.timeout}s")
            except httpx.HTTPStatusError as e:
                return AssessmentOutcome.failure("http_error", f"Gemini API error: {e.response.status_code}")
            except httpx.RequestError as e:
                return AssessmentOutcome.failure("transport_error", f"Gemini API unreachable: {type(e).__name__}")
            except InvalidPredictionError as e:
                return AssessmentOutcome.failure("invalid_payload", str(e))
            except ValueError:
                return AssessmentOutcome.failure("invalid_payload", "Gemini response body is not JSON")

        return AssessmentOutcome.success(result)
