"""Error taxonomy for the documentation pipeline.

Only failures of the primary docs fetch (other than 404) reach the caller,
and they do so as error-flagged text, never as exceptions.
"""

from __future__ import annotations

import enum


class ConfigurationError(Exception):
    """The service configuration could not be loaded."""


class SearchFailure(Exception):
    """The search endpoint could not be reached or returned an unusable body.

    Raised inside the not-found recovery flow and always absorbed there.
    """


class ErrorKind(enum.Enum):
    """Classification of a failed primary docs fetch."""

    UNAUTHORIZED = "unauthorized"  # 401
    RATE_LIMITED = "rate_limited"  # 429
    REMOTE_SERVICE = "remote_service"  # 5xx
    CLIENT = "client"  # any other non-2xx
    TRANSPORT = "transport"  # network / DNS / TLS / timeout

    @classmethod
    def from_status(cls, status: int) -> ErrorKind:
        if status == 401:
            return cls.UNAUTHORIZED
        if status == 429:
            return cls.RATE_LIMITED
        if 500 <= status <= 599:
            return cls.REMOTE_SERVICE
        return cls.CLIENT
