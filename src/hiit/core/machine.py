"""Interval state machine — turns one-second ticks into workout phases."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Optional

from hiit.core.spec import TimingSpec

logger = logging.getLogger(__name__)

Observer = Optional[Callable[[], None]]


class Phase(Enum):
    """Stages of an interval workout."""

    WARMUP = "warm up"
    HIGH = "high"
    LOW = "low"
    COOLDOWN = "cool down"
    DONE = "done"


class IntervalStateMachine:
    """Countdown through warm-up, HIGH/LOW sets and cooldown.

    The machine has no clock of its own: the host calls :meth:`tick` once
    per second.  Observers are zero-argument callables that read the new
    values back off the machine.
    """

    def __init__(
        self,
        spec: TimingSpec,
        *,
        on_phase_changed: Observer = None,
        on_counter_changed: Observer = None,
        on_sets_changed: Observer = None,
    ) -> None:
        self._spec = spec
        self._phase: Phase = Phase.WARMUP
        self._remaining_secs: int = spec.warmup_secs
        self._completed_sets: int = 0

        self._on_phase_changed = on_phase_changed
        self._on_counter_changed = on_counter_changed
        self._on_sets_changed = on_sets_changed

    # -- read accessors ------------------------------------------------------

    @property
    def spec(self) -> TimingSpec:
        return self._spec

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def remaining_secs(self) -> int:
        return self._remaining_secs

    @property
    def completed_sets(self) -> int:
        return self._completed_sets

    @property
    def is_done(self) -> bool:
        return self._phase == Phase.DONE

    # -- driving -------------------------------------------------------------

    def tick(self) -> None:
        """Advance the workout by one second and notify observers of changes."""
        if self._phase == Phase.DONE:
            return

        prev_phase = self._phase
        prev_remaining = self._remaining_secs
        prev_sets = self._completed_sets

        self._remaining_secs -= 1
        if self._remaining_secs <= 0:
            self._advance()

        if prev_phase != self._phase:
            logger.debug(
                "Phase %s -> %s (remaining=%ss, sets=%s/%s)",
                prev_phase.name,
                self._phase.name,
                self._remaining_secs,
                self._completed_sets,
                self._spec.total_sets,
            )
            if self._phase == Phase.DONE:
                logger.info("Workout complete: %s sets", self._completed_sets)
            _notify(self._on_phase_changed)
        if prev_remaining != self._remaining_secs:
            _notify(self._on_counter_changed)
        if prev_sets != self._completed_sets:
            _notify(self._on_sets_changed)

    # -- private helpers -----------------------------------------------------

    def _advance(self) -> None:
        """Leave the current, exhausted phase."""
        spec = self._spec
        if self._phase == Phase.WARMUP:
            self._enter(Phase.HIGH, spec.high_secs)
        elif self._phase == Phase.HIGH:
            self._completed_sets += 1
            self._enter(Phase.LOW, spec.low_secs)
        elif self._phase == Phase.LOW:
            if self._completed_sets == spec.total_sets:
                # A zero-length cooldown is never shown.
                if spec.cooldown_secs <= 0:
                    self._enter(Phase.DONE, spec.cooldown_secs)
                else:
                    self._enter(Phase.COOLDOWN, spec.cooldown_secs)
            else:
                self._enter(Phase.HIGH, spec.high_secs)
        elif self._phase == Phase.COOLDOWN:
            self._enter(Phase.DONE, 0)
        else:
            raise AssertionError(f"unhandled phase {self._phase!r}")

    def _enter(self, phase: Phase, seconds: int) -> None:
        self._phase = phase
        self._remaining_secs = seconds


def _notify(observer: Observer) -> None:
    if observer is not None:
        observer()
