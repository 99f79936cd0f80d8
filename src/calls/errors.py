"""Call control exceptions.

Each carries the HTTP status it maps to, so the API layer never has to know
which component raised it.
"""

from __future__ import annotations


class CallControlError(Exception):
    status_code: int = 500
    default_detail: str = "Call control error"

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(detail or self.default_detail)
        self.detail = detail or self.default_detail


class ValidationError(CallControlError):
    status_code = 400
    default_detail = "Invalid request"


class ConfigurationError(CallControlError):
    # Messages name the missing setting, never its value.
    status_code = 500
    default_detail = "Telephony provider is not configured"


class ProviderError(CallControlError):
    status_code = 500
    default_detail = "Telephony provider request failed"
