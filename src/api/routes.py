"""Softphone HTTP surface.

Browser-facing endpoints live under ``/api``; ``/voice`` is the TwiML callback
Twilio fetches once an outbound call connects. Provider-calling handlers are
plain functions so FastAPI runs them in its thread pool.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse

from api.dependencies import get_orchestrator
from api.schemas import (
    CallStartedResponse,
    DialRequest,
    HangupRequest,
    MuteRequest,
    SuccessResponse,
    TokenResponse,
)
from calls.errors import ConfigurationError
from calls.orchestrator import CallOrchestrator
from config.settings import Settings, get_settings
from voice.documents import VoiceDocument
from voice.tokens import issue_token
from voice.twiml import TWIML_MEDIA_TYPE, render_twiml

LOGGER = logging.getLogger(__name__)

router = APIRouter(tags=["softphone"])
voice_router = APIRouter(tags=["voice"])


def _twiml_response(document: VoiceDocument) -> Response:
    return Response(content=render_twiml(document), media_type=TWIML_MEDIA_TYPE)


@router.get("/token", response_model=TokenResponse)
def get_token(settings: Settings = Depends(get_settings)):
    LOGGER.info("Generating access token")
    try:
        token = issue_token(settings)
    except ConfigurationError as exc:
        LOGGER.error("Error generating token: %s", exc)
        return JSONResponse(status_code=500, content={"error": "Failed to generate token"})
    return TokenResponse(token=token.jwt)


@router.post("/test-incoming-call", response_model=CallStartedResponse)
def trigger_test_incoming_call(
    orchestrator: CallOrchestrator = Depends(get_orchestrator),
) -> CallStartedResponse:
    LOGGER.info("Triggering simulated incoming call")
    session = orchestrator.initiate_simulated_inbound_call()
    return CallStartedResponse(call_sid=session.call_id)


@router.post("/dial", response_model=CallStartedResponse)
def dial(
    payload: DialRequest | None = None,
    orchestrator: CallOrchestrator = Depends(get_orchestrator),
) -> CallStartedResponse:
    session = orchestrator.initiate_outbound_call(payload.phone_number if payload else None)
    return CallStartedResponse(call_sid=session.call_id)


@router.post("/receive-call")
async def receive_call(orchestrator: CallOrchestrator = Depends(get_orchestrator)) -> Response:
    return _twiml_response(orchestrator.handle_inbound_call())


@router.post("/mute", response_model=SuccessResponse)
def mute(
    payload: MuteRequest | None = None,
    orchestrator: CallOrchestrator = Depends(get_orchestrator),
) -> SuccessResponse:
    payload = payload or MuteRequest()
    orchestrator.set_mute_state(payload.call_sid, payload.mute)
    return SuccessResponse()


@router.post("/hangup", response_model=SuccessResponse)
def hangup(
    payload: HangupRequest | None = None,
    orchestrator: CallOrchestrator = Depends(get_orchestrator),
) -> SuccessResponse:
    orchestrator.terminate_call(payload.call_sid if payload else None)
    return SuccessResponse()


@voice_router.post("/voice")
async def outbound_voice(orchestrator: CallOrchestrator = Depends(get_orchestrator)) -> Response:
    return _twiml_response(orchestrator.handle_outbound_connected())
