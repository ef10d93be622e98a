"""Parameters for originating a new Asterisk channel."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

_OPTIONAL_FIELDS = (
    ("timeout", "timeout"),
    ("caller_id", "callerId"),
    ("context", "context"),
    ("extension", "extension"),
    ("priority", "priority"),
    ("label", "label"),
    ("app", "app"),
    ("app_args", "appArgs"),
    ("formats", "formats"),
    ("channel_id", "channelId"),
    ("other_channel_id", "otherChannelId"),
    ("originator", "originator"),
    ("variables", "variables"),
)


@dataclass
class OriginateRequest:
    """A request to create a channel.

    ``endpoint`` is ``tech/resource`` (e.g. ``PJSIP/george``).  ``timeout`` is
    in seconds; zero times out immediately and a negative value never times
    out.  Exactly one of context/extension/priority (or label) and app/app_args
    should be given.
    """

    endpoint: str = ""
    timeout: int = 0
    caller_id: str = ""
    context: str = ""
    extension: str = ""
    priority: int = 0
    label: str = ""
    app: str = ""
    app_args: str = ""
    formats: str = ""
    channel_id: str = ""
    other_channel_id: str = ""
    originator: str = ""
    variables: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """The request in wire form; empty optional fields are left out."""
        out: dict[str, Any] = {"endpoint": self.endpoint}
        for attr, name in _OPTIONAL_FIELDS:
            value = getattr(self, attr)
            if value:
                out[name] = dict(value) if isinstance(value, dict) else value
        return out