"""
Error types for BGP queries.

Every failure that should abort a run is raised as a BGPQueryError subclass
tagged with an ErrorType, so the command-line boundary can log it uniformly
and decide the exit status.
"""

from enum import Enum


class ErrorType(Enum):
    """Types of errors that can occur during a query."""
    NETWORK = "network"
    PARSING = "parsing"
    SERIALIZATION = "serialization"
    UNKNOWN = "unknown"


class BGPQueryError(Exception):
    """Base class for fatal query errors."""

    error_type = ErrorType.UNKNOWN

    def __init__(self, message: str, url: str | None = None):
        super().__init__(message)
        self.url = url


class TransportError(BGPQueryError):
    """The HTTP request could not be completed (DNS, connection, timeout)."""

    error_type = ErrorType.NETWORK


class DocumentParseError(BGPQueryError):
    """The response body could not be parsed into a document tree."""

    error_type = ErrorType.PARSING


class SerializationError(BGPQueryError):
    """Records could not be encoded as JSON."""

    error_type = ErrorType.SERIALIZATION
