"""Builders for Asterisk media URIs for common spoken items."""

from __future__ import annotations

from bisect import bisect_left
from datetime import datetime, timedelta

SUPPORTED_PLAYBACK_PREFIXES = sorted(
    ["sound", "recording", "number", "digits", "characters", "tone"]
)


def wait_uri(duration: timedelta) -> list[str]:
    """Media URIs producing the given period of silence (one per started second)."""
    if duration < timedelta(0):
        return []
    count = duration // timedelta(seconds=1) + 1
    return ["sound:silence/1"] * count


def number_uri(number: int) -> str:
    return f"number:{number}"


def _split_with(pieces: list[str], hash: str, separator: str) -> list[str]:
    result: list[str] = []
    last = len(pieces) - 1
    for i, piece in enumerate(pieces):
        result.extend(digits_uri(piece, hash))
        if i < last:
            result.append(separator)
    return result


def digits_uri(digits: str, hash: str) -> list[str]:
    """Media URIs to speak ``digits``; '#' becomes ``sound:char/<hash>`` and '*' a star."""
    if "#" in digits and hash:
        hash = "sound:char/" + hash
        return _split_with(digits.split("#"), hash, hash)
    if "*" in digits:
        return _split_with(digits.split("*"), hash, "sound:char/star")
    if not digits:
        return []
    return ["digits:" + digits]


def date_time_uri(moment: datetime) -> list[str]:
    """Media URIs speaking the weekday, month, day, 12-hour time and year."""
    weekday = moment.isoweekday() % 7
    result = [
        f"sound:digits/day-{weekday}",
        f"sound:digits/mon-{moment.month - 1}",
        number_uri(moment.day),
    ]

    hour = moment.hour
    pm = False
    if hour == 0:
        hour = 12
    elif hour == 12:
        pm = True
    elif hour > 12:
        hour -= 12
        pm = True
    result.append(number_uri(hour))

    minute = moment.minute
    if minute == 0:
        result.append("sound:digits/oclock")
    elif minute < 10:
        result.extend(["sound:digits/oh", number_uri(minute)])
    else:
        result.append(number_uri(minute))

    result.append("sound:digits/p-m" if pm else "sound:digits/a-m")
    result.append(number_uri(moment.year))
    return result


def duration_uri(duration: timedelta) -> list[str]:
    """Media URIs speaking days, hours, minutes and seconds; zero terms are omitted."""
    if duration < timedelta(0):
        return []
    total = duration.days * 86400 + duration.seconds
    parts = (
        (total // 86400, "day"),
        (total // 3600 % 24, "hour"),
        (total // 60 % 60, "minute"),
        (total % 60, "second"),
    )
    result: list[str] = []
    for amount, unit in parts:
        if amount > 0:
            suffix = "s" if amount > 1 else ""
            result.extend([number_uri(amount), f"sound:time/{unit}{suffix}"])
    return result


def recording_uri(name: str) -> str:
    return "recording:" + name


def tone_uri(name: str) -> str:
    return "tone:" + name


def check(uri: str) -> None:
    """Raise ValueError if the media URI is not well formed."""
    parts = uri.split(":")
    if len(parts) != 2:
        raise ValueError(f"audio URI {uri} is not formatted properly")
    prefix = parts[0]
    if bisect_left(SUPPORTED_PLAYBACK_PREFIXES, prefix) == len(SUPPORTED_PLAYBACK_PREFIXES):
        raise ValueError(f"audio URI prefix {prefix} not supported")