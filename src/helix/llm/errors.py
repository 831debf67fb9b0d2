"""
Helix - Generation errors.

Every failure at the generation boundary is raised as GenerationError with
a kind from a small closed set. Kinds are chosen from the exception type;
callers switch on the kind instead of reading message text.
"""

import json
from enum import Enum

import httpx
import openai
from instructor.core import InstructorRetryException
from pydantic import ValidationError


class GenerationErrorKind(str, Enum):
    """User-facing categories of generation failure."""

    API_KEY = "api_key"
    QUOTA = "quota"
    NETWORK = "network"
    SCHEMA = "schema"
    UNKNOWN = "unknown"


USER_MESSAGES: dict[GenerationErrorKind, str] = {
    GenerationErrorKind.API_KEY: (
        "API Key Error: Please ensure your API key is valid and correctly configured."
    ),
    GenerationErrorKind.QUOTA: (
        "Quota Exceeded: You have exceeded your request limit. "
        "Please check your usage and billing information."
    ),
    GenerationErrorKind.NETWORK: (
        "Network Error: Could not connect to the server. Please check your internet connection."
    ),
    GenerationErrorKind.SCHEMA: (
        "Format Error: The model returned data in an unexpected format. Please try again."
    ),
    GenerationErrorKind.UNKNOWN: (
        "Analysis Failed: The model could not process the request. "
        "Please try adjusting the parameters or try again later."
    ),
}


class GenerationError(Exception):
    """A classified failure from the generation client."""

    def __init__(self, kind: GenerationErrorKind, message: str = ""):
        super().__init__(message or kind.value)
        self.kind = kind

    @property
    def user_message(self) -> str:
        return USER_MESSAGES[self.kind]


def classify_error(exc: BaseException) -> GenerationErrorKind:
    """Map a provider/transport/parse exception to a GenerationErrorKind."""
    if isinstance(exc, GenerationError):
        return exc.kind
    if isinstance(exc, (openai.AuthenticationError, openai.PermissionDeniedError)):
        return GenerationErrorKind.API_KEY
    if isinstance(exc, openai.RateLimitError):
        return GenerationErrorKind.QUOTA
    # APITimeoutError is a subclass of APIConnectionError
    if isinstance(exc, (openai.APIConnectionError, httpx.TransportError)):
        return GenerationErrorKind.NETWORK
    if isinstance(exc, (InstructorRetryException, ValidationError, json.JSONDecodeError)):
        return GenerationErrorKind.SCHEMA
    return GenerationErrorKind.UNKNOWN


def to_generation_error(exc: BaseException) -> GenerationError:
    """Wrap any exception as a GenerationError (identity for GenerationError)."""
    if isinstance(exc, GenerationError):
        return exc
    return GenerationError(classify_error(exc), str(exc))
