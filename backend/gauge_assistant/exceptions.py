"""
Assistant Errors
================
Error taxonomy for the query path. Each error carries the HTTP status it is
reported with; the exception handlers in main.py turn them into the JSON
error envelope.

Guardrail refusals are not errors and never appear here.
"""

from fastapi import status


GENERIC_ERROR_MESSAGE = "An error occurred processing your question. Please try again."


class AssistantError(Exception):
    """Base class for errors reported to API callers"""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    # Internal errors hide their text behind the generic message
    expose_message: bool = False

    @property
    def public_message(self) -> str:
        if self.expose_message:
            return str(self)
        return GENERIC_ERROR_MESSAGE


class QueryValidationError(AssistantError):
    """Malformed request: wrong method, unreadable body or missing question"""

    expose_message = True

    def __init__(self, message: str, status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(message)
        self.status_code = status_code


class GenerationError(AssistantError):
    """The generation backend failed or returned nothing usable"""


class ConfigurationError(GenerationError):
    """Required configuration (backend credential, knowledge base file) is missing"""
