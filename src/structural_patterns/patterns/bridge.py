from __future__ import annotations

"""
Bridge Pattern: Message Sending.

Message styles (urgent, lazy, simple) and delivery channels (SMS, e-mail,
push) vary independently. A message holds a reference to a sender and
delegates delivery to it, so any style can travel over any channel.
"""

from abc import ABC, abstractmethod

from structural_patterns.patterns.output import Emitter, console_emitter


# -----------------------------------------------------------------------------
# IMPLEMENTORS
# -----------------------------------------------------------------------------

class MessageSender(ABC):
    """Delivery channel."""

    def __init__(self, emit: Emitter = console_emitter) -> None:
        self._emit = emit

    @abstractmethod
    def send_message(self, content: str) -> None:
        """Deliver already formatted content."""


class SMSSender(MessageSender):
    def send_message(self, content: str) -> None:
        self._emit(f"SMS sent: {content}")


class EmailSender(MessageSender):
    def send_message(self, content: str) -> None:
        self._emit(f"Email sent: {content}")


class PushSender(MessageSender):
    def send_message(self, content: str) -> None:
        self._emit(f"Push notification sent: {content}")


# -----------------------------------------------------------------------------
# ABSTRACTIONS
# -----------------------------------------------------------------------------

class Message(ABC):
    """
    Message style bound to a delivery channel.
    """

    def __init__(self, sender: MessageSender) -> None:
        self._sender = sender

    @property
    def sender(self) -> MessageSender:
        return self._sender

    @abstractmethod
    def format(self, content: str) -> str:
        """Apply the style to raw content."""

    def send(self, content: str) -> None:
        self._sender.send_message(self.format(content))


class UrgentMessage(Message):
    def format(self, content: str) -> str:
        return f"[URGENT] {content.upper()}"


class LazyMessage(Message):
    def format(self, content: str) -> str:
        return f"[LAZY] {content.lower()}"


class SimpleMessage(Message):
    def format(self, content: str) -> str:
        return f"[SIMPLE] {content}"
