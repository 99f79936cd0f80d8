from __future__ import annotations

import pytest

from voice.documents import (
    DialClient,
    DocumentError,
    Hold,
    Say,
    VoiceDocument,
    build_inbound_routing,
    build_outbound_greeting,
)
from voice.twiml import render_twiml


def test_outbound_greeting_is_a_single_say():
    document = build_outbound_greeting("Hello there")

    assert document.instructions == [Say("Hello there")]
    assert not document.is_terminal


def test_inbound_routing_says_then_dials_client():
    document = build_inbound_routing("browser-client", "Please hold.")

    assert document.instructions == [Say("Please hold."), DialClient("browser-client")]
    assert document.is_terminal


def test_inbound_routing_requires_identity():
    with pytest.raises(DocumentError):
        build_inbound_routing("", "Please hold.")


def test_nothing_may_follow_a_client_dial():
    document = VoiceDocument().append(DialClient("browser-client"))

    with pytest.raises(DocumentError):
        document.append(Say("too late"))
    with pytest.raises(DocumentError):
        document.append(DialClient("someone-else"))


def test_hold_must_be_positive():
    with pytest.raises(DocumentError):
        VoiceDocument().append(Hold(seconds=0))


def test_render_outbound_greeting():
    xml = render_twiml(build_outbound_greeting("Hello from Twilio!"))

    assert xml == (
        "<?xml version=\"1.0\" encoding=\"UTF-8\"?>"
        "<Response><Say>Hello from Twilio!</Say></Response>"
    )


def test_render_inbound_routing_with_hold():
    document = VoiceDocument.of([Say("One moment"), Hold(2), DialClient("browser-client")])

    assert render_twiml(document) == (
        "<?xml version=\"1.0\" encoding=\"UTF-8\"?>"
        "<Response>"
        "<Say>One moment</Say>"
        "<Pause length=\"2\" />"
        "<Dial><Client>browser-client</Client></Dial>"
        "</Response>"
    )


def test_render_escapes_text():
    xml = render_twiml(build_outbound_greeting("Tom & Jerry <3"))

    assert "<Say>Tom &amp; Jerry &lt;3</Say>" in xml


def test_render_is_deterministic():
    first = render_twiml(build_outbound_greeting("Hi"))
    second = render_twiml(build_outbound_greeting("Hi"))

    assert first == second
