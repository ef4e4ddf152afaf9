"""
Error kinds raised while scheduling an Estes pickup
"""
from abc import ABC
from typing import Optional, Dict, Any, List
from enum import Enum

from estes_pickup.schemas.estes_pickup_schema import PickupRejection


class ErrorCode(Enum):
    """Standardized error codes"""
    SERIALIZATION_ERROR = "SERIALIZATION_ERROR"
    NETWORK_ERROR = "NETWORK_ERROR"
    TIMEOUT_ERROR = "TIMEOUT_ERROR"
    CARRIER_REJECTED = "CARRIER_REJECTED"
    MALFORMED_RESPONSE = "MALFORMED_RESPONSE"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"


class BaseApplicationException(Exception, ABC):
    """Base exception for the application"""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        self.message = message
        self.error_code = error_code.value
        self.details = details or {}
        self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the exception to a dict for the API response"""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "status_code": self.status_code
        }


class PickupException(BaseApplicationException):
    """Base class for every failure of a pickup request"""


class SerializationError(PickupException):
    """The pickup request could not be encoded as XML. Not retryable."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorCode.SERIALIZATION_ERROR, details, 500)


class TransportError(PickupException):
    """Network, TLS, DNS or request construction failure"""

    def __init__(self, message: str, url: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        error_details = details or {}
        if url is not None:
            error_details["url"] = url
        super().__init__(message, ErrorCode.NETWORK_ERROR, error_details, 502)
        self.url = url


class PickupTimeoutError(PickupException):
    """No complete response within the configured timeout"""

    def __init__(self, message: str, url: str, timeout_seconds: float):
        super().__init__(
            message,
            ErrorCode.TIMEOUT_ERROR,
            {"url": url, "timeout_seconds": timeout_seconds},
            504
        )
        self.url = url
        self.timeout_seconds = timeout_seconds


class CarrierRejectedError(PickupException):
    """Estes understood the request and refused it"""

    def __init__(self, rejection: PickupRejection):
        message = f"Estes rejected the pickup request: {rejection.code} - {rejection.description}"
        super().__init__(
            message,
            ErrorCode.CARRIER_REJECTED,
            {
                "code": rejection.code,
                "description": rejection.description,
                "bad_data": rejection.bad_data,
            },
            422
        )
        self.rejection = rejection

    @property
    def code(self) -> str:
        return self.rejection.code

    @property
    def description(self) -> str:
        return self.rejection.description

    @property
    def bad_data(self) -> str:
        return self.rejection.bad_data


class MalformedResponseError(PickupException):
    """Reply matched neither the confirmation nor the error shape"""

    def __init__(self, raw_body: bytes, reason: Optional[str] = None):
        message = "Estes returned an unrecognized pickup response"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(
            message,
            ErrorCode.MALFORMED_RESPONSE,
            {"raw_body": raw_body.decode("utf-8", errors="replace")},
            502
        )
        self.raw_body = raw_body


class ConfigurationError(PickupException):
    """Required Estes configuration is missing"""

    def __init__(self, message: str, missing: Optional[List[str]] = None):
        super().__init__(message, ErrorCode.CONFIGURATION_ERROR, {"missing": missing or []}, 500)
        self.missing = missing or []
