"""
Custom Error Classes

Errors raised by the CLI, the API and the data loaders. The engine itself
does not raise for empty or missing data.
"""

from typing import Optional


class GiftRadarError(Exception):
    """Base error"""

    def __init__(self, message: str, code: str = "GIFTRADAR_ERROR", suggestion: Optional[str] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion

    def to_dict(self) -> dict:
        """Convert to dictionary"""
        error_dict = {
            "code": self.code,
            "message": self.message
        }
        if self.suggestion:
            error_dict["suggestion"] = self.suggestion
        return error_dict


class InvalidParameterError(GiftRadarError):
    """Invalid parameter error"""

    def __init__(self, message: str, suggestion: Optional[str] = None):
        super().__init__(
            message=message,
            code="INVALID_PARAMETER",
            suggestion=suggestion or "Please check if the parameter format is correct"
        )


class DataNotFoundError(GiftRadarError):
    """Data not found error"""

    def __init__(self, message: str, suggestion: Optional[str] = None):
        super().__init__(
            message=message,
            code="DATA_NOT_FOUND",
            suggestion=suggestion or "Please check DATA_PATH or the app.data_path setting"
        )
