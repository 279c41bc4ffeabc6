"""Timing specification — validated, immutable workout configuration."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Union

MAX_SETS = 99
MAX_MINUTES = 59
MAX_SECONDS = 59
MAX_DURATION = MAX_MINUTES * 60 + MAX_SECONDS

_CLOCK_RE = re.compile(r"[0-9]{1,2}:[0-9]{1,2}")


class DurationErrorKind(Enum):
    """Reasons a duration field can be rejected."""

    INVALID_FORMAT = "invalid format"
    MINUTES_OUT_OF_RANGE = "minutes out of range"
    SECONDS_OUT_OF_RANGE = "seconds out of range"
    DURATION_OUT_OF_RANGE = "duration out of range"


class SetCountErrorKind(Enum):
    """Reasons the set count can be rejected."""

    NOT_A_NUMBER = "not a number"
    SETS_TOO_HIGH = "sets too high"
    SETS_TOO_LOW = "sets too low"


class TimingSpecError(ValueError):
    """Raised when a :class:`TimingSpec` cannot be built from the given input."""

    def __init__(self, field: str, kind: Enum, reason: str) -> None:
        super().__init__(f"Unable to create TimingSpec: {field}: {reason}")
        self.field = field
        self.kind = kind
        self.reason = reason


class InvalidDuration(TimingSpecError):
    """A duration field is malformed or out of range."""

    kind: DurationErrorKind


class InvalidSetCount(TimingSpecError):
    """The set count is not a number or out of range."""

    kind: SetCountErrorKind


@dataclass(frozen=True)
class Seconds:
    """A duration given as a plain count of seconds."""

    value: int

    def to_seconds(self, field: str) -> int:
        if not (0 <= self.value <= MAX_DURATION):
            raise InvalidDuration(
                field,
                DurationErrorKind.DURATION_OUT_OF_RANGE,
                f"total seconds {self.value} outside 0..{MAX_DURATION}",
            )
        return self.value


@dataclass(frozen=True)
class Clock:
    """A duration given as ``MM:SS`` text."""

    text: str

    def to_seconds(self, field: str) -> int:
        if not _CLOCK_RE.fullmatch(self.text):
            raise InvalidDuration(
                field, DurationErrorKind.INVALID_FORMAT, f"invalid format {self.text!r}"
            )
        minutes_text, seconds_text = self.text.split(":")
        minutes, seconds = int(minutes_text), int(seconds_text)
        if minutes > MAX_MINUTES:
            raise InvalidDuration(
                field,
                DurationErrorKind.MINUTES_OUT_OF_RANGE,
                f"minutes value {minutes} exceeds maximum value {MAX_MINUTES}",
            )
        if seconds > MAX_SECONDS:
            raise InvalidDuration(
                field,
                DurationErrorKind.SECONDS_OUT_OF_RANGE,
                f"seconds value {seconds} exceeds maximum value {MAX_SECONDS}",
            )
        return minutes * 60 + seconds


DurationInput = Union[Seconds, Clock]


def parse_duration_text(text: str) -> DurationInput:
    """Turn raw user text into a tagged duration input.

    ``"20"`` becomes ``Seconds(20)``; anything else is treated as clock text
    and left for :meth:`Clock.to_seconds` to accept or reject.
    """
    stripped = text.strip()
    if stripped.isdecimal():
        return Seconds(int(stripped))
    return Clock(stripped)


def _parse_sets(raw: int | str) -> int:
    try:
        sets = int(raw)
    except (TypeError, ValueError):
        raise InvalidSetCount(
            "sets", SetCountErrorKind.NOT_A_NUMBER, f"{raw!r} is not a number"
        ) from None
    if sets > MAX_SETS:
        raise InvalidSetCount("sets", SetCountErrorKind.SETS_TOO_HIGH, f"sets over {MAX_SETS}")
    if sets < 1:
        raise InvalidSetCount("sets", SetCountErrorKind.SETS_TOO_LOW, "sets cannot be less than 1")
    return sets


@dataclass(frozen=True)
class TimingSpec:
    """Phase durations (in seconds) and the number of sets of a workout.

    Build instances with :meth:`create`, which validates every field before
    anything is constructed.
    """

    warmup_secs: int
    high_secs: int
    low_secs: int
    cooldown_secs: int
    total_sets: int

    @classmethod
    def create(
        cls,
        warmup: DurationInput,
        high: DurationInput,
        low: DurationInput,
        cooldown: DurationInput,
        total_sets: int | str,
    ) -> TimingSpec:
        """Validate the five inputs and return a new spec.

        Raises :class:`InvalidDuration` or :class:`InvalidSetCount` on the
        first offending field.
        """
        return cls(
            warmup_secs=warmup.to_seconds("warmup"),
            high_secs=high.to_seconds("high"),
            low_secs=low.to_seconds("low"),
            cooldown_secs=cooldown.to_seconds("cooldown"),
            total_sets=_parse_sets(total_sets),
        )

    @property
    def total_duration(self) -> int:
        """Seconds from the start of warm-up to the end of cooldown."""
        return (
            self.warmup_secs
            + self.total_sets * (self.high_secs + self.low_secs)
            + self.cooldown_secs
        )
