"""Shared FastAPI dependencies.

Separated so tests can override the gateway without touching route modules.
"""

from __future__ import annotations

from functools import lru_cache

from fastapi import Depends

from calls.models import CallGateway
from calls.orchestrator import CallOrchestrator
from config.settings import Settings, get_settings
from integrations.twilio_client import TwilioGateway


@lru_cache(maxsize=1)
def _gateway_factory() -> TwilioGateway:
    # The Twilio client itself is only built on the first provider request.
    return TwilioGateway(get_settings())


def get_gateway() -> CallGateway:
    return _gateway_factory()


def get_orchestrator(
    settings: Settings = Depends(get_settings),
    gateway: CallGateway = Depends(get_gateway),
) -> CallOrchestrator:
    return CallOrchestrator(settings, gateway)
