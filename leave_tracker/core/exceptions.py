from typing import Any, Dict, Optional

class AppException(Exception):
    def __init__(
        self,
        message: str,
        status_code: int = 400,
        error_code: str = "BUSINESS_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details
        super().__init__(self.message)

class InvalidRangeError(AppException):
    def __init__(self, message: str = "Start date must be on or before end date"):
        super().__init__(
            message=message,
            status_code=422,
            error_code="INVALID_RANGE"
        )

class InvalidDateError(AppException):
    def __init__(self, value: Any):
        super().__init__(
            message=f"Unparsable date: {value!r}",
            status_code=422,
            error_code="INVALID_DATE",
            details={"value": str(value)}
        )

class OverlapError(AppException):
    """Raised (or reported) when a leave period shares a day with an existing leave."""
    def __init__(self, conflicting_id: Optional[str] = None):
        super().__init__(
            message="This period overlaps an existing leave",
            status_code=409,
            error_code="LEAVE_OVERLAP",
            details={"conflicting_id": conflicting_id} if conflicting_id else None
        )

class NotFoundError(AppException):
    def __init__(self, entity: str, entity_id: Any):
        super().__init__(
            message=f"{entity} {entity_id} not found",
            status_code=404,
            error_code="NOT_FOUND"
        )

class ImportFormatError(AppException):
    def __init__(self, message: str = "Invalid data format: a 'leaves' array is required"):
        super().__init__(
            message=message,
            status_code=400,
            error_code="INVALID_IMPORT"
        )
