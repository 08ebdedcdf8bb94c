"""
Conversation model
Messages and the caller-owned history they are appended to
"""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, overload

from ...core.exceptions import ValidationError


class Role(Enum):
    """Message author"""
    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"


@dataclass(frozen=True)
class ConversationMessage:
    """A single immutable message"""
    role: Role
    content: str
    timestamp: datetime = field(default_factory=datetime.now)
    emotion: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "role": self.role.value,
            "content": self.content,
            "timestamp": self.timestamp.isoformat(),
            "emotion": self.emotion,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ConversationMessage":
        """
        Build a message from client data

        Raises:
            ValidationError: unknown role
        """
        try:
            role = Role(data.get("role"))
        except ValueError:
            raise ValidationError("Unknown message role", field="role", value=data.get("role"))

        timestamp = data.get("timestamp")
        if isinstance(timestamp, (int, float)):
            # epoch milliseconds from the web client
            parsed = datetime.fromtimestamp(timestamp / 1000)
        elif isinstance(timestamp, str):
            parsed = datetime.fromisoformat(timestamp)
        elif isinstance(timestamp, datetime):
            parsed = timestamp
        else:
            parsed = datetime.now()
        return cls(
            role=role,
            content=data.get("content") or "",
            timestamp=parsed,
            emotion=data.get("emotion"),
        )


class ConversationHistory(Sequence[ConversationMessage]):
    """
    Ordered, append-only session history

    Owned by the caller; the router only reads a window of it.
    """

    def __init__(self, messages: Sequence[ConversationMessage] | None = None):
        self._messages: list[ConversationMessage] = list(messages or [])

    @overload
    def __getitem__(self, index: int) -> ConversationMessage: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[ConversationMessage]: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return tuple(self._messages[index])
        return self._messages[index]

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[ConversationMessage]:
        return iter(self._messages)

    def append(self, message: ConversationMessage) -> None:
        self._messages.append(message)

    def add_user(self, content: str) -> ConversationMessage:
        message = ConversationMessage(role=Role.USER, content=content)
        self.append(message)
        return message

    def add_assistant(self, content: str, emotion: str | None = None) -> ConversationMessage:
        message = ConversationMessage(role=Role.ASSISTANT, content=content, emotion=emotion)
        self.append(message)
        return message
