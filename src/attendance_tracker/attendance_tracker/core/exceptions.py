from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

logger = logging.getLogger(__name__)


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when there is no signed-in user or login credentials are invalid."""


class DataFetchError(DomainError):
    """Raised when the record store reports an error.

    The message of the underlying error is kept so it can be shown to the caller.
    Fetches are never retried.
    """


@contextmanager
def store_errors(action: str) -> Iterator[None]:
    """Re-raise record store failures as DataFetchError, keeping the underlying message."""
    try:
        yield
    except DomainError:
        raise
    except Exception as e:
        logger.exception("Error %s", action)
        raise DataFetchError(str(e) or f"Failed {action}") from e
