"""Logging channel and sound resources."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Protocol

from arikit.key import Key


class LoggingBackend(Protocol):
    """The transport operations a log handle relies on."""

    def data(self, key: Key) -> "LogData": ...

    def rotate(self, key: Key) -> None: ...

    def delete(self, key: Key) -> None: ...


@dataclass
class LogData:
    """The state of a logging channel; ``levels`` is comma separated."""

    key: Optional[Key] = None
    name: str = ""
    levels: str = ""
    types: str = ""
    status: str = ""


class LogHandle:
    """A reference to a logging channel."""

    def __init__(self, key: Key, logging: LoggingBackend) -> None:
        self._key = key
        self._logging = logging

    @property
    def id(self) -> str:
        return self._key.id

    @property
    def key(self) -> Key:
        return self._key

    def data(self) -> LogData:
        return self._logging.data(self._key)

    def rotate(self) -> None:
        """Rotate the channel's log files."""
        self._logging.rotate(self._key)

    def delete(self) -> None:
        """Remove the logging channel."""
        self._logging.delete(self._key)


@dataclass
class FormatLangPair:
    """The format and language of one sound file."""

    format: str = ""
    language: str = ""


@dataclass
class SoundData:
    """A media file that may be played back."""

    key: Optional[Key] = None
    formats: list[FormatLangPair] = field(default_factory=list)
    id: str = ""
    text: str = ""