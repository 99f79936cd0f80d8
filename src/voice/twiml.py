from __future__ import annotations

from xml.sax.saxutils import escape

from voice.documents import DialClient, Hold, Instruction, Say, VoiceDocument

TWIML_MEDIA_TYPE = "application/xml"


def _render_instruction(instruction: Instruction) -> str:
    if isinstance(instruction, Say):
        return f"<Say>{escape(instruction.text)}</Say>"
    if isinstance(instruction, DialClient):
        return f"<Dial><Client>{escape(instruction.identity)}</Client></Dial>"
    if isinstance(instruction, Hold):
        return f"<Pause length=\"{int(instruction.seconds)}\" />"
    raise TypeError(f"Unsupported instruction: {instruction!r}")


def render_twiml(document: VoiceDocument) -> str:
    body = "".join(_render_instruction(item) for item in document.instructions)
    return (
        "<?xml version=\"1.0\" encoding=\"UTF-8\"?>"
        "<Response>"
        f"{body}"
        "</Response>"
    )
