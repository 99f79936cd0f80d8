from __future__ import annotations

import json
import logging
from dataclasses import dataclass

from twilio.base.exceptions import TwilioRestException

from calls.errors import ConfigurationError, ProviderError
from calls.models import CallHandle, CallMutation, CallRequest, CompleteCall, MuteCall
from config.settings import Settings

LOGGER = logging.getLogger(__name__)

TWILIO_API_BASE = "https://api.twilio.com/2010-04-01"


@dataclass(frozen=True)
class TwilioCredentials:
    account_sid: str
    auth_token: str


@dataclass(frozen=True)
class TwilioConfig:
    account_sid: str
    auth_token: str
    from_number: str
    public_base_url: str


@dataclass(frozen=True)
class TokenConfig:
    account_sid: str
    api_key: str
    api_secret: str
    twiml_app_sid: str


def get_twilio_credentials(settings: Settings) -> TwilioCredentials:
    if not settings.twilio_account_sid or not settings.twilio_auth_token:
        raise ConfigurationError("Twilio credentials are not configured")
    return TwilioCredentials(
        account_sid=settings.twilio_account_sid,
        auth_token=settings.twilio_auth_token,
    )


def get_twilio_config(settings: Settings) -> TwilioConfig:
    credentials = get_twilio_credentials(settings)
    if not settings.twilio_phone_number:
        raise ConfigurationError("Twilio phone number is not configured")
    if not settings.server_base_url:
        raise ConfigurationError("SERVER_BASE_URL is required for Twilio callbacks")

    return TwilioConfig(
        account_sid=credentials.account_sid,
        auth_token=credentials.auth_token,
        from_number=settings.twilio_phone_number,
        public_base_url=settings.server_base_url.rstrip("/"),
    )


def get_token_config(settings: Settings) -> TokenConfig:
    if not settings.twilio_account_sid:
        raise ConfigurationError("Twilio account is not configured")
    if not settings.twilio_api_key or not settings.twilio_api_secret:
        raise ConfigurationError("Twilio API key is not configured")
    if not settings.twilio_twiml_app_sid:
        raise ConfigurationError("TwiML application is not configured")

    return TokenConfig(
        account_sid=settings.twilio_account_sid,
        api_key=settings.twilio_api_key,
        api_secret=settings.twilio_api_secret,
        twiml_app_sid=settings.twilio_twiml_app_sid,
    )


def build_twilio_client(cfg: TwilioCredentials):
    from twilio.rest import Client

    return Client(cfg.account_sid, cfg.auth_token)


def _provider_message(exc: Exception) -> str:
    if isinstance(exc, TwilioRestException) and exc.msg:
        return str(exc.msg)
    return str(exc) or type(exc).__name__


class TwilioGateway:
    """Single entry point to the Twilio REST API.

    Every failure leaves as ``ProviderError`` carrying Twilio's own message.
    Nothing is retried.
    """

    def __init__(self, settings: Settings, client=None) -> None:
        self._settings = settings
        self._client = client

    @property
    def client(self):
        if self._client is None:
            self._client = build_twilio_client(get_twilio_credentials(self._settings))
        return self._client

    def create_call(self, request: CallRequest) -> CallHandle:
        client = self.client
        try:
            call = client.calls.create(
                to=request.to,
                from_=request.from_,
                url=request.url,
                method=request.method,
            )
        except Exception as exc:
            raise ProviderError(_provider_message(exc)) from exc

        return CallHandle(sid=str(call.sid), status=getattr(call, "status", None))

    def update_call(self, call_sid: str, mutation: CallMutation) -> None:
        client = self.client
        account_sid = get_twilio_credentials(self._settings).account_sid
        try:
            if isinstance(mutation, CompleteCall):
                client.calls(call_sid).update(status="completed")
            elif isinstance(mutation, MuteCall):
                self._post_mute(client, account_sid, call_sid, mutation.muted)
            else:
                raise TypeError(f"Unsupported call mutation: {mutation!r}")
        except Exception as exc:
            raise ProviderError(_provider_message(exc)) from exc

    def _post_mute(self, client, account_sid: str, call_sid: str, muted: bool) -> None:
        # The typed Call resource has no mute parameter, so the attribute is posted as-is.
        uri = f"{TWILIO_API_BASE}/Accounts/{account_sid}/Calls/{call_sid}.json"
        response = client.request("POST", uri, data={"Muted": "true" if muted else "false"})
        if response.status_code >= 400:
            try:
                message = json.loads(response.text).get("message")
            except ValueError:
                message = None
            raise TwilioRestException(
                response.status_code,
                uri,
                msg=message or f"Unable to update call {call_sid}",
                method="POST",
            )
