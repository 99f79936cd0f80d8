"""Call-handling documents returned to Twilio when it asks how to treat a call leg.

A document is an ordered list of instructions. Rendering to TwiML lives in
``voice.twiml`` so documents can be built and inspected without any markup.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Union


class DocumentError(ValueError):
    pass


@dataclass(frozen=True)
class Say:
    text: str


@dataclass(frozen=True)
class DialClient:
    identity: str


@dataclass(frozen=True)
class Hold:
    seconds: int = 1


Instruction = Union[Say, DialClient, Hold]


@dataclass
class VoiceDocument:
    instructions: list[Instruction] = field(default_factory=list)

    @classmethod
    def of(cls, instructions: Iterable[Instruction]) -> VoiceDocument:
        document = cls()
        for instruction in instructions:
            document.append(instruction)
        return document

    @property
    def is_terminal(self) -> bool:
        return any(isinstance(item, DialClient) for item in self.instructions)

    def append(self, instruction: Instruction) -> VoiceDocument:
        # Once the leg is connected to a client nothing else is executed.
        if self.is_terminal:
            raise DocumentError("No instruction may follow a client dial")
        if isinstance(instruction, Hold) and instruction.seconds < 1:
            raise DocumentError("Hold must last at least one second")
        self.instructions.append(instruction)
        return self


def build_outbound_greeting(text: str) -> VoiceDocument:
    """Spoken confirmation that an outbound call connected."""

    return VoiceDocument.of([Say(text)])


def build_inbound_routing(target_identity: str, announcement: str) -> VoiceDocument:
    """Announce the hold, then bridge the caller to the browser client."""

    if not target_identity:
        raise DocumentError("Target client identity is required")
    return VoiceDocument.of([Say(announcement), DialClient(target_identity)])
