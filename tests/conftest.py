"""
Test configuration and fixtures.
"""

from typing import Any

import pytest

from handbook_assistant.core.message import Message
from handbook_assistant.exceptions import InferenceError
from handbook_assistant.providers.base import LLMProvider, LLMResponse
from handbook_assistant.utils.config import AssistantConfig

HANDBOOK_TEXT = (
    "Employees receive 15 days of paid vacation annually. "
    "Remote work requires manager approval."
)

HANDBOOK_PAGES = [
    "Employees receive 15 days of paid vacation annually.",
    "Remote work requires manager approval.",
]


def write_pdf(path, pages: list[str]):
    """Write a minimal PDF with one line of Helvetica text per page."""
    kids = b" ".join(b"%d 0 R" % (4 + 2 * i) for i in range(len(pages)))
    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [%s] /Count %d >>" % (kids, len(pages)),
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]
    for i, text in enumerate(pages):
        objects.append(
            b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
            b"/Resources << /Font << /F1 3 0 R >> >> /Contents %d 0 R >>" % (5 + 2 * i)
        )
        stream = b"BT /F1 12 Tf 72 720 Td (%s) Tj ET" % text.encode("latin-1")
        objects.append(b"<< /Length %d >>\nstream\n%s\nendstream" % (len(stream), stream))

    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, 1):
        offsets.append(len(out))
        out += b"%d 0 obj\n%s\nendobj\n" % (number, body)
    xref = len(out)
    out += b"xref\n0 %d\n0000000000 65535 f \n" % (len(objects) + 1)
    for offset in offsets:
        out += b"%010d 00000 n \n" % offset
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\nstartxref\n%d\n%%%%EOF\n" % (len(objects) + 1, xref)
    path.write_bytes(bytes(out))
    return path


class FakeProvider(LLMProvider):
    """Records every request and answers from a script."""

    def __init__(self, replies: list[str] | None = None, error: Exception | None = None):
        self.replies = list(replies or [])
        self.error = error
        self.calls: list[dict[str, Any]] = []

    async def complete(self, messages, *, model, temperature=1.0, top_p=1.0, max_tokens=4096, **kwargs):
        self.calls.append({
            "messages": messages,
            "model": model,
            "temperature": temperature,
            "top_p": top_p,
            "max_tokens": max_tokens,
        })
        if self.error is not None:
            raise self.error
        reply = self.replies.pop(0) if self.replies else "Hello! 😊"
        return LLMResponse(
            message=Message.assistant(reply),
            usage={"prompt_tokens": 20, "completion_tokens": 4, "total_tokens": 24},
        )


@pytest.fixture
def handbook_file(tmp_path):
    """A small plain-text handbook."""
    path = tmp_path / "employee_handbook.txt"
    path.write_text(HANDBOOK_TEXT, encoding="utf-8")
    return path


@pytest.fixture
def config(handbook_file):
    return AssistantConfig(handbook_path=str(handbook_file), chunk_size=40, model="fake-model")


@pytest.fixture
def fake_provider():
    return FakeProvider()


@pytest.fixture
def failing_provider():
    return FakeProvider(error=InferenceError("Model call failed: connection refused"))
