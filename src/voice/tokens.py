"""Capability tokens for the browser softphone.

Tokens are signed Twilio access tokens carrying a voice grant. They are handed
to the client and never stored or decoded here.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum

from twilio.jwt.access_token import AccessToken
from twilio.jwt.access_token.grants import VoiceGrant

from calls.errors import ConfigurationError
from config.settings import Settings
from integrations.twilio_client import get_token_config

LOGGER = logging.getLogger(__name__)


class CallGrant(str, Enum):
    RECEIVE_CALLS = "receive_calls"
    PLACE_CALLS = "place_calls"


@dataclass(frozen=True)
class CapabilityToken:
    identity: str
    grants: frozenset[CallGrant]
    expiry: datetime
    jwt: str


def issue_token(settings: Settings, identity: str | None = None) -> CapabilityToken:
    identity = identity or settings.browser_client_identity
    cfg = get_token_config(settings)

    token = AccessToken(
        cfg.account_sid,
        cfg.api_key,
        cfg.api_secret,
        identity=identity,
        ttl=settings.token_ttl_seconds,
    )
    token.add_grant(
        VoiceGrant(
            outgoing_application_sid=cfg.twiml_app_sid,
            incoming_allow=True,
        )
    )

    try:
        jwt = token.to_jwt()
    except Exception as exc:
        # The signing error may echo key material, so only its type is kept.
        LOGGER.error("Access token signing failed: %s", type(exc).__name__)
        raise ConfigurationError("Access token signing failed") from exc

    LOGGER.info("Issued access token for identity %s", identity)
    return CapabilityToken(
        identity=identity,
        grants=frozenset({CallGrant.RECEIVE_CALLS, CallGrant.PLACE_CALLS}),
        expiry=datetime.now(timezone.utc) + timedelta(seconds=settings.token_ttl_seconds),
        jwt=jwt.decode("utf-8") if isinstance(jwt, bytes) else str(jwt),
    )
