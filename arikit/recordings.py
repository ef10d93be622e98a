"""Live and stored recordings: data, handles and recording options."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Callable, Optional, Protocol

from arikit.key import Key


class LiveRecordingBackend(Protocol):
    """The transport operations a live recording handle relies on."""

    def data(self, key: Key) -> "LiveRecordingData": ...

    def stop(self, key: Key) -> None: ...

    def pause(self, key: Key) -> None: ...

    def resume(self, key: Key) -> None: ...

    def mute(self, key: Key) -> None: ...

    def unmute(self, key: Key) -> None: ...

    def scrap(self, key: Key) -> None: ...

    def stored(self, key: Key) -> "StoredRecordingHandle": ...

    def subscribe(self, key: Key, *event_types: str) -> Any: ...


class StoredRecordingBackend(Protocol):
    """The transport operations a stored recording handle relies on."""

    def data(self, key: Key) -> "StoredRecordingData": ...

    def copy(self, key: Key, dest: str) -> "StoredRecordingHandle": ...

    def delete(self, key: Key) -> None: ...


@dataclass
class LiveRecordingData:
    """The state of a live recording; durations are in seconds."""

    key: Optional[Key] = None
    cause: str = ""
    duration: float = 0.0
    format: str = ""
    name: str = ""
    silence: float = 0.0
    state: str = ""
    talking: float = 0.0
    target_uri: str = ""

    @property
    def id(self) -> str:
        return self.name


@dataclass
class StoredRecordingData:
    """The data describing a stored recording."""

    key: Optional[Key] = None
    format: str = ""
    name: str = ""

    @property
    def id(self) -> str:
        return self.name


@dataclass
class RecordingOptions:
    """Options for starting a recording; empty strings mean the server default."""

    format: str = ""
    max_duration: timedelta = timedelta(0)
    max_silence: timedelta = timedelta(0)
    exists: str = ""
    beep: bool = False
    terminate: str = ""


@dataclass
class Recording:
    """Groups the stored and live recording transports."""

    stored: Optional[StoredRecordingBackend] = None
    live: Optional[LiveRecordingBackend] = None


class LiveRecordingHandle:
    """A reference to a live recording, possibly staged for later execution."""

    def __init__(
        self,
        key: Key,
        recording: LiveRecordingBackend,
        exec: Optional[Callable[["LiveRecordingHandle"], None]] = None,
    ) -> None:
        self._key = key
        self._recording = recording
        self._exec = exec
        self._executed = False
        self._lock = threading.Lock()

    @property
    def id(self) -> str:
        return self._key.id

    @property
    def key(self) -> Key:
        return self._key

    def data(self) -> LiveRecordingData:
        return self._recording.data(self._key)

    def stop(self) -> None:
        """Stop and save the recording."""
        self._recording.stop(self._key)

    def scrap(self) -> None:
        """Stop and discard the recording."""
        self._recording.scrap(self._key)

    def resume(self) -> None:
        self._recording.resume(self._key)

    def pause(self) -> None:
        self._recording.pause(self._key)

    def mute(self) -> None:
        self._recording.mute(self._key)

    def unmute(self) -> None:
        self._recording.unmute(self._key)

    def stored(self) -> "StoredRecordingHandle":
        return self._recording.stored(self._key)

    def subscribe(self, *event_types: str) -> Any:
        return self._recording.subscribe(self._key, *event_types)

    def exec(self) -> None:
        """Run the staged operation, at most once; later calls do nothing."""
        with self._lock:
            if self._executed:
                return
            self._executed = True
            func, self._exec = self._exec, None
            if func is not None:
                func(self)


class StoredRecordingHandle:
    """A reference to a stored recording."""

    def __init__(
        self,
        key: Key,
        recording: StoredRecordingBackend,
        exec: Optional[Callable[["StoredRecordingHandle"], None]] = None,
    ) -> None:
        self._key = key
        self._recording = recording
        self._exec = exec
        self._executed = False

    @property
    def id(self) -> str:
        return self._key.id

    @property
    def key(self) -> Key:
        return self._key

    def exec(self) -> None:
        """Run the staged operation, at most once; later calls do nothing."""
        if self._executed:
            return
        self._executed = True
        func, self._exec = self._exec, None
        if func is not None:
            func(self)

    def data(self) -> StoredRecordingData:
        return self._recording.data(self._key)

    def copy(self, dest: str) -> "StoredRecordingHandle":
        """Copy the recording to ``dest`` and return the destination's handle."""
        return self._recording.copy(self._key, dest)

    def delete(self) -> None:
        self._recording.delete(self._key)