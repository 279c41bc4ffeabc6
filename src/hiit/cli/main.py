"""CLI entry point for hiit-timer.

Uses Click to expose the ``hiit`` command group.  Every option can also be
set through ``HIIT_<COMMAND>_<OPTION>`` environment variables.
"""

from __future__ import annotations

import logging
import sys
from typing import Callable, TypeVar

import click

import hiit
from hiit.core.display import format_clock, format_sets, phase_color, phase_label
from hiit.core.session import (
    DEFAULT_COOLDOWN_SECS,
    DEFAULT_HIGH_SECS,
    DEFAULT_LOW_SECS,
    DEFAULT_SETS,
    DEFAULT_WARMUP_SECS,
    WorkoutSession,
)
from hiit.core.spec import DurationInput, TimingSpec, TimingSpecError, parse_duration_text
from hiit.core.ticker import Ticker

T = TypeVar("T")

logger = logging.getLogger(__name__)


class DurationType(click.ParamType):
    """Accept ``MM:SS`` text or a plain number of seconds."""

    name = "duration"

    def convert(
        self, value: object, param: click.Parameter | None, ctx: click.Context | None
    ) -> DurationInput:
        if isinstance(value, (int, str)):
            return parse_duration_text(str(value))
        return value


DURATION = DurationType()

_PAUSE_CHOICES = ["r", "s", "q"]


def setup_logging(verbose: bool) -> None:
    """Configure logging for the CLI."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _run(action: Callable[[], T]) -> T:
    """Execute *action*, converting ``TimingSpecError`` to a CLI error.

    On ``TimingSpecError`` the message is printed to stderr and the
    process exits with code 1.
    """
    try:
        return action()
    except TimingSpecError as exc:
        click.echo(str(exc), err=True)
        sys.exit(1)


def _timing_options(func: Callable) -> Callable:
    """Attach the five configuration options shared by ``check`` and ``run``."""
    options = [
        click.option(
            "--warmup",
            type=DURATION,
            default=str(DEFAULT_WARMUP_SECS),
            show_default=True,
            help="Warm-up length (MM:SS or seconds).",
        ),
        click.option(
            "--high",
            type=DURATION,
            default=str(DEFAULT_HIGH_SECS),
            show_default=True,
            help="High-intensity length (MM:SS or seconds).",
        ),
        click.option(
            "--low",
            type=DURATION,
            default=str(DEFAULT_LOW_SECS),
            show_default=True,
            help="Low-intensity length (MM:SS or seconds).",
        ),
        click.option(
            "--cooldown",
            type=DURATION,
            default=str(DEFAULT_COOLDOWN_SECS),
            show_default=True,
            help="Cooldown length (MM:SS or seconds).",
        ),
        click.option(
            "--sets",
            default=str(DEFAULT_SETS),
            show_default=True,
            help="Number of high/low sets (1-99).",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


@click.group(context_settings={"auto_envvar_prefix": "HIIT"})
@click.version_option(version=hiit.__version__, prog_name="hiit")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """hiit-timer: an interval training countdown for the terminal."""
    setup_logging(verbose)


@cli.command()
@_timing_options
def check(
    warmup: DurationInput,
    high: DurationInput,
    low: DurationInput,
    cooldown: DurationInput,
    sets: str,
) -> None:
    """Validate a configuration and print the workout plan."""
    spec = _run(lambda: TimingSpec.create(warmup, high, low, cooldown, sets))
    click.echo(f"warm up    {format_clock(spec.warmup_secs)}")
    click.echo(f"high       {format_clock(spec.high_secs)}")
    click.echo(f"low        {format_clock(spec.low_secs)}")
    click.echo(f"cool down  {format_clock(spec.cooldown_secs)}")
    click.echo(f"sets       {spec.total_sets}")
    click.echo(f"total      {format_clock(spec.total_duration)}")


@cli.command()
@_timing_options
def run(
    warmup: DurationInput,
    high: DurationInput,
    low: DurationInput,
    cooldown: DurationInput,
    sets: str,
) -> None:
    """Run a workout, counting down once per second.

    Press Ctrl-C to pause; the countdown can then be resumed, reset to the
    start of warm-up, or quit.
    """

    def show_phase() -> None:
        machine = session.machine
        click.secho(
            phase_label(machine.phase).upper(), fg=phase_color(machine.phase), bold=True
        )
        click.echo(f"\r{format_clock(machine.remaining_secs)}", nl=False)

    def on_phase_changed() -> None:
        click.echo("\a")
        show_phase()

    def on_counter_changed() -> None:
        click.echo(f"\r{format_clock(session.machine.remaining_secs)}", nl=False)

    def on_sets_changed() -> None:
        machine = session.machine
        click.echo(f"  sets {format_sets(machine.completed_sets, session.spec.total_sets)}")

    session = WorkoutSession(
        on_phase_changed=on_phase_changed,
        on_counter_changed=on_counter_changed,
        on_sets_changed=on_sets_changed,
    )
    _run(lambda: session.configure(warmup, high, low, cooldown, sets))
    logger.debug("Starting workout: %s", session.spec)
    show_phase()

    ticker = Ticker(session.tick)
    while not session.is_done:
        try:
            ticker.run(until=lambda: session.is_done)
        except KeyboardInterrupt:
            click.echo()
            click.echo(f"Paused: {session.status()}")
            choice = click.prompt(
                "[r]esume, re[s]et or [q]uit",
                type=click.Choice(_PAUSE_CHOICES),
                default="r",
            )
            if choice == "q":
                click.echo(f"Stopped: {session.status()}")
                sys.exit(1)
            if choice == "s":
                click.echo(session.reset())
                show_phase()

    click.echo()
    click.echo(session.status())
