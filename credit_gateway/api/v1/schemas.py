"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from credit_gateway.domain.models import AssessmentResult, CreditRating, FinancialProfile


class CamelModel(BaseModel):
    """Base schema exchanging camelCase JSON"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, protected_namespaces=())


class AssessmentRequest(CamelModel):
    """Request body for POST /v1/assessment"""

    income: float = Field(0, ge=0, description="Annual income")
    debt: float = Field(0, ge=0, description="Total debt excluding mortgage")
    credit_utilization: float = Field(0, ge=0, description="Credit utilization percent")
    late_payments: int = Field(0, ge=0, description="Late payments in the last 12 months")
    credit_age: float = Field(0, ge=0, description="Age of oldest account in years")
    num_accounts: int = Field(0, ge=0, description="Number of open accounts")

    @field_validator("*", mode="before")
    @classmethod
    def empty_as_zero(cls, value):
        """Blank form fields count as zero"""
        if value is None or value == "":
            return 0
        return value

    def to_profile(self) -> FinancialProfile:
        return FinancialProfile(
            income=self.income,
            debt=self.debt,
            credit_utilization=self.credit_utilization,
            late_payments=self.late_payments,
            credit_age=self.credit_age,
            num_accounts=self.num_accounts,
        )


class ModelAnalysisSchema(CamelModel):
    """Model quality metrics"""

    precision: float
    recall: float
    f1_score: float
    roc_auc: float
    model_used: str


class AssessmentResponse(CamelModel):
    """Response for POST /v1/assessment"""

    credit_score: int
    credit_rating: CreditRating
    justification: str
    model_analysis: ModelAnalysisSchema

    @classmethod
    def from_result(cls, result: AssessmentResult) -> "AssessmentResponse":
        analysis = result.model_analysis
        return cls(
            credit_score=result.credit_score,
            credit_rating=result.credit_rating,
            justification=result.justification,
            model_analysis=ModelAnalysisSchema(
                precision=analysis.precision,
                recall=analysis.recall,
                f1_score=analysis.f1_score,
                roc_auc=analysis.roc_auc,
                model_used=analysis.model_used,
            ),
        )
