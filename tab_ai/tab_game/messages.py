from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Protocol, Tuple

from loguru import logger

SYSTEM = "System"


class MessageSink(Protocol):
    def add_message(self, sender: str, text: str) -> None:
        ...


@dataclass(slots=True)
class LoggingMessageSink:
    """Forwards status notifications to the log."""

    def add_message(self, sender: str, text: str) -> None:
        logger.info(f"[{sender}] {text}")


@dataclass(slots=True)
class RecordingMessageSink:
    messages: List[Tuple[str, str]] = field(default_factory=list)

    def add_message(self, sender: str, text: str) -> None:
        self.messages.append((sender, text))

    def texts(self) -> List[str]:
        return [text for _, text in self.messages]
