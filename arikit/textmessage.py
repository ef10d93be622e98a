"""Text messages sent to and received from endpoints."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Protocol

from arikit.key import Key


class TextMessageBackend(Protocol):
    """The transport operations for sending text messages."""

    def send(self, from_: str, tech: str, resource: str, body: str, variables: dict[str, str]) -> None: ...

    def send_by_uri(self, from_: str, to: str, body: str, variables: dict[str, str]) -> None: ...


@dataclass
class TextMessageVariable:
    """A key-value pair attached to a text message."""

    key: str = ""
    value: str = ""


@dataclass
class TextMessageData:
    """A text message; ``from_`` and ``to`` are technology-specific URIs."""

    key: Optional[Key] = None
    body: str = ""
    from_: str = ""
    to: str = ""
    variables: list[TextMessageVariable] = field(default_factory=list)