"""
Custom Exception Classes for the Proposal Match Engine
"""
from typing import Any, Dict


class ProposalEngineError(Exception):
    """Base exception for the proposal engine"""

    def __init__(
        self,
        message: str,
        error_code: str = None,
        details: Dict[str, Any] = None,
        cause: Exception = None
    ):
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        self.cause = cause
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/response"""
        result = {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details
        }
        if self.cause:
            result["cause"] = str(self.cause)
        return result


class ProposalValidationError(ProposalEngineError):
    """Raised when the profile or job is missing or structurally invalid"""

    def __init__(self, message: str, field: str = None, **kwargs):
        details = kwargs.pop("details", None) or {}
        if field:
            details["field"] = field
        super().__init__(message, error_code="VALIDATION_ERROR", details=details, **kwargs)


class GenerationServiceError(ProposalEngineError):
    """Raised when the text-generation service fails or returns nothing"""

    def __init__(self, message: str, model_name: str = None, **kwargs):
        details = kwargs.pop("details", None) or {}
        if model_name:
            details["model_name"] = model_name
        super().__init__(message, error_code="GENERATION_ERROR", details=details, **kwargs)
