"""Call data passed between the orchestrator and the provider gateway."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, Union


class CallDirection(str, Enum):
    INBOUND = "inbound"
    OUTBOUND = "outbound"


class CallState(str, Enum):
    REQUESTED = "requested"
    RINGING = "ringing"
    CONNECTED = "connected"
    MUTED = "muted"
    TERMINATED = "terminated"


@dataclass(frozen=True)
class CallSession:
    """A call leg as seen by a single request. Never stored."""

    call_id: str
    direction: CallDirection
    state: CallState
    counterparty_address: str


@dataclass(frozen=True)
class CallRequest:
    to: str
    from_: str
    url: str
    method: str = "POST"


@dataclass(frozen=True)
class CallHandle:
    sid: str
    status: str | None = None


@dataclass(frozen=True)
class MuteCall:
    muted: bool


@dataclass(frozen=True)
class CompleteCall:
    pass


CallMutation = Union[MuteCall, CompleteCall]


class CallGateway(Protocol):
    def create_call(self, request: CallRequest) -> CallHandle:
        ...

    def update_call(self, call_sid: str, mutation: CallMutation) -> None:
        ...
