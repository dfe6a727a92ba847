class AnalysisError(Exception):
    """Base exception for the analysis engine."""


class ValidationError(AnalysisError):
    """Raised when an analysis request is malformed."""

    def __init__(self, message: str, field: str = None):
        super().__init__(message)
        self.message = message
        self.field = field


class InvalidInputError(AnalysisError):
    """Raised when a scorer receives input it cannot measure."""


class InternalComputationError(AnalysisError):
    """Wraps an unexpected failure inside the analysis pipeline."""

    def __init__(self, message: str, stage: str = None):
        super().__init__(message)
        self.stage = stage


class UnknownIndustryError(AnalysisError):
    """Raised by strict benchmark lookups for an unsupported industry."""

    def __init__(self, industry: str):
        super().__init__(f"Unknown industry: {industry}")
        self.industry = industry
