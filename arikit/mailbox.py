"""Voice mailbox resources."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol

from arikit.key import Key


class MailboxBackend(Protocol):
    """The transport operations a mailbox handle relies on."""

    def data(self, key: Key) -> "MailboxData": ...

    def update(self, key: Key, old_messages: int, new_messages: int) -> None: ...

    def delete(self, key: Key) -> None: ...


@dataclass
class MailboxData:
    """The state of a voice mailbox."""

    key: Optional[Key] = None
    name: str = ""
    new_messages: int = 0
    old_messages: int = 0


class MailboxHandle:
    """A reference to a mailbox."""

    def __init__(self, key: Key, mailbox: MailboxBackend) -> None:
        self._key = key
        self._mailbox = mailbox

    @property
    def id(self) -> str:
        return self._key.id

    @property
    def key(self) -> Key:
        return self._key

    def data(self) -> MailboxData:
        """The current state of the mailbox."""
        return self._mailbox.data(self._key)

    def update(self, old_messages: int, new_messages: int) -> None:
        """Set the message counts, creating the mailbox if it does not exist."""
        self._mailbox.update(self._key, old_messages, new_messages)

    def delete(self) -> None:
        self._mailbox.delete(self._key)