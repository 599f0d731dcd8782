from __future__ import annotations

"""
Unit tests for the message bridge.
"""

import pytest

from structural_patterns.patterns.bridge import (
    EmailSender,
    LazyMessage,
    PushSender,
    SimpleMessage,
    SMSSender,
    UrgentMessage,
)


@pytest.mark.parametrize(
    "message_cls, expected",
    [
        (UrgentMessage, "[URGENT] SERVER IS DOWN!"),
        (LazyMessage, "[LAZY] server is down!"),
        (SimpleMessage, "[SIMPLE] Server is Down!"),
    ],
)
def test_message_styles(message_cls, expected, lines):
    message_cls(SMSSender(lines.append)).send("Server is Down!")
    assert lines == [f"SMS sent: {expected}"]


@pytest.mark.parametrize(
    "sender_cls, prefix",
    [
        (SMSSender, "SMS sent: "),
        (EmailSender, "Email sent: "),
        (PushSender, "Push notification sent: "),
    ],
)
def test_any_style_over_any_channel(sender_cls, prefix, lines):
    UrgentMessage(sender_cls(lines.append)).send("ping")
    assert lines == [f"{prefix}[URGENT] PING"]


def test_message_keeps_sender_reference(lines):
    sender = PushSender(lines.append)
    assert SimpleMessage(sender).sender is sender
