"""Workout session — owns the single live state machine for a timer."""

from __future__ import annotations

import logging

from hiit.core.display import format_clock, format_sets, phase_label
from hiit.core.machine import IntervalStateMachine, Observer
from hiit.core.spec import DurationInput, Seconds, TimingSpec, TimingSpecError

logger = logging.getLogger(__name__)

DEFAULT_WARMUP_SECS = 15
DEFAULT_HIGH_SECS = 20
DEFAULT_LOW_SECS = 40
DEFAULT_COOLDOWN_SECS = 300
DEFAULT_SETS = 20


def default_spec() -> TimingSpec:
    """Return the configuration used when none is given."""
    return TimingSpec.create(
        Seconds(DEFAULT_WARMUP_SECS),
        Seconds(DEFAULT_HIGH_SECS),
        Seconds(DEFAULT_LOW_SECS),
        Seconds(DEFAULT_COOLDOWN_SECS),
        DEFAULT_SETS,
    )


class WorkoutSession:
    """Host for one interval timer.

    Reconfiguring or resetting replaces the machine wholesale; a rejected
    configuration leaves the previous spec and machine in place.
    """

    def __init__(
        self,
        spec: TimingSpec | None = None,
        *,
        on_phase_changed: Observer = None,
        on_counter_changed: Observer = None,
        on_sets_changed: Observer = None,
    ) -> None:
        self._spec: TimingSpec = spec if spec is not None else default_spec()
        self._on_phase_changed = on_phase_changed
        self._on_counter_changed = on_counter_changed
        self._on_sets_changed = on_sets_changed
        self._machine: IntervalStateMachine = self._new_machine()

    # -- public API ----------------------------------------------------------

    @property
    def spec(self) -> TimingSpec:
        return self._spec

    @property
    def machine(self) -> IntervalStateMachine:
        return self._machine

    @property
    def is_done(self) -> bool:
        return self._machine.is_done

    def configure(
        self,
        warmup: DurationInput,
        high: DurationInput,
        low: DurationInput,
        cooldown: DurationInput,
        sets: int | str,
    ) -> str:
        """Switch to a new configuration.  Raises :class:`TimingSpecError` if invalid."""
        try:
            spec = TimingSpec.create(warmup, high, low, cooldown, sets)
        except TimingSpecError as exc:
            logger.warning("Configuration rejected, keeping previous: %s", exc)
            raise
        self._spec = spec
        self._machine = self._new_machine()
        logger.info("Configured: %s", spec)
        return (
            f"Configured: {spec.total_sets} sets, "
            f"{format_clock(spec.total_duration)} total"
        )

    def reset(self) -> str:
        """Start over with the current configuration."""
        self._machine = self._new_machine()
        logger.debug("Session reset")
        return f"Reset: {format_clock(self._spec.warmup_secs)} warm up"

    def tick(self) -> None:
        self._machine.tick()

    def status(self) -> str:
        """Return a one-line summary of where the workout is."""
        machine = self._machine
        if machine.is_done:
            return "Workout complete"
        return (
            f"{phase_label(machine.phase)} {format_clock(machine.remaining_secs)} "
            f"sets {format_sets(machine.completed_sets, self._spec.total_sets)}"
        )

    # -- private helpers -----------------------------------------------------

    def _new_machine(self) -> IntervalStateMachine:
        return IntervalStateMachine(
            self._spec,
            on_phase_changed=self._on_phase_changed,
            on_counter_changed=self._on_counter_changed,
            on_sets_changed=self._on_sets_changed,
        )
