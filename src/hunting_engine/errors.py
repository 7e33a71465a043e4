"""
Error taxonomy for the hunting engine.

Orchestrators never catch-and-retry: they raise one of these and let it
propagate to the HTTP boundary, which maps each kind to a status code
(see `hunting_engine.api.common.errors`).
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional


class HuntingEngineError(Exception):
    """Base class for every error the engine raises on purpose."""

    error_type: str = "HuntingEngineError"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class DomainValidationError(HuntingEngineError):
    """Input failed a domain contract. Carries every violated field, not just the first."""

    error_type = "ValidationError"

    def __init__(self, message: str, fields: List[Dict[str, Any]]):
        super().__init__(message, details={"fields": fields})
        self.fields = fields

    @property
    def field_names(self) -> List[str]:
        return [f["field"] for f in self.fields]


class NotFoundError(HuntingEngineError):
    error_type = "NotFound"


class NoHuntsFoundError(NotFoundError):
    """Playbook generation requested for a sub-channel without any hunts."""

    def __init__(self, sub_channel: str):
        super().__init__(f"No hunts found for sub-channel: {sub_channel}")
        self.sub_channel = sub_channel


class ExternalServiceError(HuntingEngineError):
    """
    The generative synthesis call failed (network, auth, malformed or
    unparsable response). The underlying exception is chained as __cause__.
    """

    error_type = "ExternalServiceError"


class HuntingServiceError(ExternalServiceError):
    """
    Hunt orchestration failed on the synthesis side. When the model output
    could not be parsed, `raw_text` holds it unmodified for diagnostics.
    """

    def __init__(self, message: str, raw_text: Optional[str] = None):
        super().__init__(message)
        self.raw_text = raw_text


class PlaybookGenerationError(ExternalServiceError):
    pass
