"""
Custom exception hierarchy for coordparse.

Unrecognized text is not an error: the parser returns None for it. The
exceptions below cover invalid caller input, degenerate geometry and
failures of the underlying projection library.
"""

from typing import Any, Dict, List, Optional


class CoordparseException(Exception):
    """
    Base exception for all coordparse-specific errors.

    Attributes:
        error_code: String identifier for the error type
        message: User-friendly error message
        details: Technical details for logging/debugging
        status_code: HTTP status code for API responses
        suggestions: Optional list of resolution suggestions
    """

    def __init__(
        self,
        message: str,
        error_code: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize CoordparseException.

        Args:
            message: User-friendly error message
            error_code: String identifier for the error type
            status_code: HTTP status code (default: 500)
            details: Technical details for logging
            suggestions: List of suggestions for resolution
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.details = details or {}
        self.suggestions = suggestions or []

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert exception to dictionary for API responses.

        Returns:
            Dictionary representation of the error
        """
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "suggestions": self.suggestions,
        }

    def __str__(self) -> str:
        """String representation of the exception."""
        return f"{self.error_code}: {self.message}"

    def __repr__(self) -> str:
        """Detailed string representation for debugging."""
        return (
            f"{self.__class__.__name__}("
            f"error_code='{self.error_code}', "
            f"message='{self.message}', "
            f"status_code={self.status_code})"
        )


class ValidationError(CoordparseException):
    """
    Raised when input validation fails.

    Maps to HTTP 400 Bad Request.
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize ValidationError.

        Args:
            message: User-friendly error message
            field: Name of the field that failed validation
            details: Technical details about the validation failure
            suggestions: List of suggestions for fixing the validation error
        """
        error_details = details or {}
        if field:
            error_details["field"] = field

        super().__init__(
            message=message,
            error_code="VALIDATION_ERROR",
            status_code=400,
            details=error_details,
            suggestions=suggestions or ["Check the input format and try again"],
        )


class ParseError(CoordparseException):
    """
    Raised when text cannot be read as a coordinate.

    The Python API returns None for unrecognized text; this exception is
    what the HTTP layer reports for the same situation.
    Maps to HTTP 422 Unprocessable Entity.
    """

    def __init__(
        self,
        message: str,
        text: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize ParseError.

        Args:
            message: User-friendly error message
            text: The text that could not be parsed
            details: Technical details about the parsing failure
            suggestions: List of suggestions for fixing the input
        """
        error_details = details or {}
        if text is not None:
            error_details["text"] = text

        default_suggestions = [
            "Enter exactly one coordinate pair, e.g. 46.95 7.44",
            "Supported: LV95, LV03, WGS84 decimal or DMS, MGRS",
        ]

        super().__init__(
            message=message,
            error_code="PARSE_ERROR",
            status_code=422,
            details=error_details,
            suggestions=suggestions or default_suggestions,
        )


class GeometryError(CoordparseException):
    """
    Raised when geometry processing fails.

    Used for degenerate polygons (zero area) whose centroid is undefined.
    Maps to HTTP 422 Unprocessable Entity.
    """

    def __init__(
        self,
        message: str,
        geometry_type: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize GeometryError.

        Args:
            message: User-friendly error message
            geometry_type: Type of geometry that caused the error
            details: Technical details about the geometry error
            suggestions: List of suggestions for fixing the geometry
        """
        error_details = details or {}
        if geometry_type:
            error_details["geometry_type"] = geometry_type

        default_suggestions = [
            "Check that the points are not all collinear",
            "Provide at least three distinct vertices",
        ]

        super().__init__(
            message=message,
            error_code="GEOMETRY_ERROR",
            status_code=422,
            details=error_details,
            suggestions=suggestions or default_suggestions,
        )


class CRSError(CoordparseException):
    """
    Raised when a coordinate reference system operation fails.

    Maps to HTTP 422 Unprocessable Entity.
    """

    def __init__(
        self,
        message: str,
        source_crs: Optional[str] = None,
        target_crs: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize CRSError.

        Args:
            message: User-friendly error message
            source_crs: Source coordinate reference system
            target_crs: Target coordinate reference system
            details: Technical details about the CRS error
            suggestions: List of suggestions for fixing the CRS issue
        """
        error_details = details or {}
        if source_crs:
            error_details["source_crs"] = source_crs
        if target_crs:
            error_details["target_crs"] = target_crs

        default_suggestions = [
            "Verify the EPSG code is valid",
            "Check that the coordinates lie inside the projection's area of use",
        ]

        super().__init__(
            message=message,
            error_code="CRS_ERROR",
            status_code=422,
            details=error_details,
            suggestions=suggestions or default_suggestions,
        )


class TransformationError(CRSError):
    """Raised when coordinate transformation fails."""


class ConfigurationError(CoordparseException):
    """
    Raised when application configuration is invalid.

    Maps to HTTP 500 Internal Server Error.
    """

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize ConfigurationError.

        Args:
            message: User-friendly error message
            config_key: Configuration key that is invalid
            details: Technical details about the configuration error
            suggestions: List of suggestions for fixing the configuration
        """
        error_details = details or {}
        if config_key:
            error_details["config_key"] = config_key

        super().__init__(
            message=message,
            error_code="CONFIGURATION_ERROR",
            status_code=500,
            details=error_details,
            suggestions=suggestions or ["Check the COORDPARSE_* environment variables"],
        )
