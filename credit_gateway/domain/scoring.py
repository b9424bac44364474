"""Deterministic credit scoring engine - simulates an ML credit model"""

import math
from typing import Callable

from credit_gateway.domain.models import (
    AssessmentResult,
    CreditRating,
    FinancialProfile,
    ModelAnalysis,
    ScoreFactors,
)
from credit_gateway.utils.random_utils import round_half_up, seeded_rand

BASE_SCORE = 720
MIN_SCORE = 300
MAX_SCORE = 850
SIMULATED_MODEL_NAME = "Simulated Random Forest"

Rand = Callable[[], float]


def derive_seed(profile: FinancialProfile) -> int:
    """
    Tie the noise stream to the exact input.

    Identical profiles share a seed; small changes to any field move it.
    A sum that overflows to infinity (or NaN) seeds the zero stream.
    """
    total = (
        profile.income
        + profile.debt
        + profile.credit_utilization
        + profile.late_payments * 37
        + profile.credit_age * 13
        + profile.num_accounts * 7
    )
    if not math.isfinite(total):
        return 0
    return math.floor(total)


def calculate_score_factors(profile: FinancialProfile) -> ScoreFactors:
    """
    Compute penalties and bonuses from the raw profile.

    Inputs are used as given. Utilization above 100% keeps growing the
    penalty; the debt ratio is capped at 1.0 and uses max(1, income) as the
    denominator so zero income never divides by zero.
    """
    utilization_penalty = (profile.credit_utilization / 100) * 150
    debt_ratio = min(1, profile.debt / max(1, profile.income)) if profile.debt > 0 else 0
    debt_penalty = debt_ratio * 200
    late_penalty = min(60, profile.late_payments * 20)
    age_bonus = min(60, profile.credit_age * 3)
    accounts_bonus = min(40, profile.num_accounts * 2)

    return ScoreFactors(
        utilization_penalty=utilization_penalty,
        debt_ratio=debt_ratio,
        debt_penalty=debt_penalty,
        late_penalty=late_penalty,
        age_bonus=age_bonus,
        accounts_bonus=accounts_bonus,
    )


def calculate_credit_score(factors: ScoreFactors, noise_draw: float) -> int:
    """
    Apply factors and +/-10 points of noise to the base score, clamped to [300, 850].

    The raw score is clamped before rounding so overflowing penalties
    saturate at a bound. A NaN raw score (opposing infinite factors) scores 300.
    """
    noisy = (noise_draw - 0.5) * 20
    raw_score = (
        BASE_SCORE
        - factors.utilization_penalty
        - factors.debt_penalty
        - factors.late_penalty
        + factors.age_bonus
        + factors.accounts_bonus
        + noisy
    )
    if math.isnan(raw_score):
        return MIN_SCORE
    return round_half_up(max(MIN_SCORE, min(MAX_SCORE, raw_score)))


def score_to_rating(score: int) -> CreditRating:
    """
    Map a credit score to its rating bucket.

    Bands (lower bound inclusive):
    - 800+: Excellent
    - 740-799: Good
    - 670-739: Fair
    - 580-669: Poor
    - below 580: Very Poor
    """
    if score >= 800:
        return "Excellent"
    elif score >= 740:
        return "Good"
    elif score >= 670:
        return "Fair"
    elif score >= 580:
        return "Poor"
    else:
        return "Very Poor"


def _format_grouped(value: float) -> str:
    # Thousands separators, at most three decimals
    return f"{value:,.3f}".rstrip("0").rstrip(".")


def _format_plain(value: float) -> str:
    # JavaScript number-to-string: positional from 1e-6 up to 1e21, exponent outside
    if isinstance(value, int):
        if abs(value) < 1e21:
            return str(value)
        value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"

    magnitude = abs(value)
    sign = "-" if value < 0 else ""
    if value.is_integer() and magnitude < 1e21:
        return str(int(value))

    mantissa, _, exponent = repr(magnitude).partition("e")
    if not exponent:
        return sign + mantissa
    exp = int(exponent)
    if magnitude >= 1e21 or magnitude < 1e-6:
        return f"{sign}{mantissa}e{'+' if exp > 0 else '-'}{abs(exp)}"

    # 1e-6 <= magnitude < 1e-4, which repr writes with an exponent
    digits = mantissa.replace(".", "")
    return f"{sign}0.{'0' * (-exp - 1)}{digits}"


def build_justification(profile: FinancialProfile, rating: CreditRating, debt_ratio: float) -> str:
    """Explain the score in terms of the inputs that drove it"""
    return (
        f"Based on income of ${_format_grouped(profile.income)} and a credit utilization of "
        f"{_format_plain(profile.credit_utilization)}%, this profile results in a {rating.lower()} score. "
        f"Key factors: {_format_plain(profile.late_payments)} late payments, "
        f"debt-to-income ratio ~{round_half_up(debt_ratio * 100)}%, "
        f"and account history of {_format_plain(profile.credit_age)} years."
    )


def simulate_model_analysis(rand: Rand) -> ModelAnalysis:
    """
    Draw plausible model-quality metrics from the stream.

    Draw order is precision, recall, ROC-AUC. F1 is the harmonic mean of the
    drawn precision and recall.
    """
    precision = 0.70 + rand() * 0.25
    recall = 0.65 + rand() * 0.30
    f1_score = (2 * precision * recall) / (precision + recall)
    roc_auc = 0.70 + rand() * 0.25

    return ModelAnalysis(
        precision=precision,
        recall=recall,
        f1_score=f1_score,
        roc_auc=roc_auc,
        model_used=SIMULATED_MODEL_NAME,
    )


def score_profile(profile: FinancialProfile, rand: Rand) -> AssessmentResult:
    """Score a profile using an already seeded stream (consumes four draws)"""
    factors = calculate_score_factors(profile)
    credit_score = calculate_credit_score(factors, rand())
    credit_rating = score_to_rating(credit_score)

    return AssessmentResult(
        credit_score=credit_score,
        credit_rating=credit_rating,
        justification=build_justification(profile, credit_rating, factors.debt_ratio),
        model_analysis=simulate_model_analysis(rand),
    )


def simulated_latency_ms(rand: Rand) -> int:
    """Cosmetic network delay in [500, 1100) ms"""
    return 500 + round_half_up(rand() * 600)


def assess_credit_worthiness(profile: FinancialProfile) -> AssessmentResult:
    """
    Main entry point: deterministic assessment of a financial profile.

    Pure function of the input. Every call builds its own generator from the
    profile seed, so concurrent calls share no state.
    """
    return score_profile(profile, seeded_rand(derive_seed(profile)))
