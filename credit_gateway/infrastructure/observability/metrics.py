"""Prometheus metrics for monitoring score distribution, ratings, and backend health"""

from prometheus_client import Counter, Histogram

# Assessment metrics
assessment_counter = Counter(
    "credit_assessment_total",
    "Total credit assessments returned",
    ["backend", "rating"],
)

assessment_failure_counter = Counter(
    "credit_assessment_failures_total",
    "Assessments that ended as unavailable",
    ["backend", "reason"],
)

credit_score_histogram = Histogram(
    "credit_score",
    "Distribution of returned credit scores",
    buckets=[300, 580, 670, 740, 800, 850],
)

# Remote AI metrics
remote_latency_histogram = Histogram(
    "remote_assessment_latency_seconds",
    "Gemini generateContent response time",
    buckets=[0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_assessment(backend: str, credit_score: int, credit_rating: str) -> None:
    """Record assessment metrics for monitoring the rating mix"""
    assessment_counter.labels(backend=backend, rating=credit_rating).inc()
    credit_score_histogram.observe(credit_score)


def record_assessment_failure(backend: str, reason: str) -> None:
    """Record an unavailable assessment"""
    assessment_failure_counter.labels(backend=backend, reason=reason).inc()
