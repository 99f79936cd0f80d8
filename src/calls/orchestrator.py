"""Translates softphone intents into Twilio operations and call-handling documents.

Each operation issues at most one provider request and keeps no state between
requests; Twilio remains the source of truth for every call.
"""

from __future__ import annotations

import logging

from calls.errors import ValidationError
from calls.models import (
    CallDirection,
    CallGateway,
    CallRequest,
    CallSession,
    CallState,
    CompleteCall,
    MuteCall,
)
from config.settings import Settings
from integrations.twilio_client import get_twilio_config
from voice.documents import VoiceDocument, build_inbound_routing, build_outbound_greeting

LOGGER = logging.getLogger(__name__)

OUTBOUND_HANDLER_PATH = "/voice"
INBOUND_HANDLER_PATH = "/api/receive-call"


class CallOrchestrator:
    def __init__(self, settings: Settings, gateway: CallGateway) -> None:
        self._settings = settings
        self._gateway = gateway

    def initiate_outbound_call(self, target_number: str | None) -> CallSession:
        if not target_number or not target_number.strip():
            raise ValidationError("Phone number is required")

        cfg = get_twilio_config(self._settings)
        handle = self._gateway.create_call(
            CallRequest(
                to=target_number,
                from_=cfg.from_number,
                url=f"{cfg.public_base_url}{OUTBOUND_HANDLER_PATH}",
            )
        )
        LOGGER.info("Outbound call %s requested to %s", handle.sid, target_number)
        return CallSession(
            call_id=handle.sid,
            direction=CallDirection.OUTBOUND,
            state=CallState.REQUESTED,
            counterparty_address=target_number,
        )

    def initiate_simulated_inbound_call(self) -> CallSession:
        """Have Twilio call our own number so the inbound path runs without a real caller."""

        cfg = get_twilio_config(self._settings)
        handle = self._gateway.create_call(
            CallRequest(
                to=cfg.from_number,
                from_=cfg.from_number,
                url=f"{cfg.public_base_url}{INBOUND_HANDLER_PATH}",
            )
        )
        LOGGER.info("Simulated incoming call SID: %s", handle.sid)
        return CallSession(
            call_id=handle.sid,
            direction=CallDirection.INBOUND,
            state=CallState.REQUESTED,
            counterparty_address=cfg.from_number,
        )

    def handle_outbound_connected(self) -> VoiceDocument:
        return build_outbound_greeting(self._settings.outbound_greeting)

    def handle_inbound_call(self) -> VoiceDocument:
        return build_inbound_routing(
            self._settings.browser_client_identity,
            self._settings.inbound_announcement,
        )

    def set_mute_state(self, call_sid: str | None, muted: bool) -> None:
        # A missing SID is still sent; Twilio's rejection is the error the caller sees.
        self._gateway.update_call(call_sid or "", MuteCall(muted=muted))
        LOGGER.info("Call %s mute set to %s", call_sid, muted)

    def terminate_call(self, call_sid: str | None) -> None:
        self._gateway.update_call(call_sid or "", CompleteCall())
        LOGGER.info("Call %s hung up", call_sid)
