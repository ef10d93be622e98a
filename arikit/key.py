"""Resource keys: cluster-wide identifiers for ARI entities and matching on them."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable, Iterable, Optional, Protocol

APPLICATION_KEY = "application"
BRIDGE_KEY = "bridge"
CHANNEL_KEY = "channel"
DEVICE_STATE_KEY = "devicestate"
ENDPOINT_KEY = "endpoint"
LIVE_RECORDING_KEY = "liverecording"
LOGGING_KEY = "logging"
MAILBOX_KEY = "mailbox"
MODULE_KEY = "module"
PLAYBACK_KEY = "playback"
SOUND_KEY = "sound"
STORED_RECORDING_KEY = "storedrecording"
VARIABLE_KEY = "variable"


class Matcher(Protocol):
    """Anything that can decide whether a key matches."""

    def match(self, key: Optional["Key"]) -> bool: ...


@dataclass(frozen=True)
class Key:
    """Identifies an ARI resource; empty fields act as wildcards when matching."""

    kind: str = ""
    id: str = ""
    node: str = ""
    dialog: str = ""
    app: str = ""

    def match(self, other: Optional["Key"]) -> bool:
        """Return True if ``other`` matches this key; empty fields are wildcards."""
        if other is None or other is self:
            return True
        for mine, theirs in (
            (self.app, other.app),
            (self.dialog, other.dialog),
            (self.node, other.node),
            (self.kind, other.kind),
            (self.id, other.id),
        ):
            if mine and theirs and mine != theirs:
                return False
        return True

    def new(self, kind: str, id: str) -> "Key":
        """Return a key of the given kind and id at this key's location."""
        return Key(kind=kind, id=id, node=self.node, dialog=self.dialog, app=self.app)

    def __str__(self) -> str:
        if self.id:
            return self.id
        if self.dialog:
            return f"[{self.dialog}]"
        if self.node:
            return f"{self.app}@{self.node}"
        return "emptyKey"


KeyOption = Callable[[Key], Key]


class MatchFunc:
    """Adapts a plain predicate to the matcher interface."""

    def __init__(self, func: Callable[[Optional[Key]], bool]) -> None:
        self._func = func

    def match(self, key: Optional[Key]) -> bool:
        return bool(self._func(key))


class Keys(list):
    """A list of keys with filtering helpers."""

    def filter(self, *matchers: Matcher) -> "Keys":
        """Keys matching each matcher in turn, grouped by matcher."""
        return Keys(key for m in matchers for key in self if m.match(key))

    def without(self, matcher: Matcher) -> "Keys":
        """Keys that do not match the matcher."""
        return Keys(key for key in self if not matcher.match(key))

    def first(self) -> Optional[Key]:
        """The first key, or None for an empty list."""
        return self[0] if self else None

    def bridges(self) -> "Keys":
        return self.filter(new_key(BRIDGE_KEY, ""))

    def channels(self) -> "Keys":
        return self.filter(new_key(CHANNEL_KEY, ""))

    def id(self, id: str) -> Optional[Key]:
        """The first key whose id matches, or None."""
        return self.filter(new_key("", id)).first()


def with_dialog(dialog: str) -> KeyOption:
    return lambda key: replace(key, dialog=dialog)


def with_node(node: str) -> KeyOption:
    return lambda key: replace(key, node=node)


def with_app(app: str) -> KeyOption:
    return lambda key: replace(key, app=app)


def with_location_of(ref: Optional[Key]) -> KeyOption:
    """Copy node, dialog and app from ``ref`` (no-op when ref is None)."""

    def apply(key: Key) -> Key:
        if ref is None:
            return key
        return replace(key, node=ref.node, dialog=ref.dialog, app=ref.app)

    return apply


def _apply(key: Key, opts: Iterable[KeyOption]) -> Key:
    for opt in opts:
        key = opt(key)
    return key


def new_key(kind: str, id: str, *opts: KeyOption) -> Key:
    """Build a key from kind, id and option functions."""
    return _apply(Key(kind=kind, id=id), opts)


def app_key(app: str) -> Key:
    return new_key("", "", with_app(app))


def config_id(class_: str, kind: str, id: str) -> str:
    return f"{class_}/{kind}/{id}"


def endpoint_id(tech: str, resource: str) -> str:
    return f"{tech}/{resource}"


def dialog_key(dialog: str) -> Key:
    return new_key("", "", with_dialog(dialog))


def node_key(app: str, node: str) -> Key:
    return new_key("", "", with_app(app), with_node(node))


def kind_key(kind: str, *opts: KeyOption) -> Key:
    return new_key(kind, "", *opts)