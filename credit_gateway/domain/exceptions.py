"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidPredictionError(DomainException):
    """Remote prediction payload is missing fields or has the wrong types"""

    pass
