"""Text and colour helpers for rendering a running workout."""

from hiit.core.machine import Phase

IDLE_COLOR = "yellow"

_PHASE_COLORS = {
    Phase.WARMUP: "yellow",
    Phase.HIGH: "red",
    Phase.LOW: "green",
    Phase.COOLDOWN: "blue",
    Phase.DONE: IDLE_COLOR,
}


def format_clock(seconds: int) -> str:
    """Format *seconds* as zero-padded ``MM:SS``."""
    return f"{seconds // 60:02d}:{seconds % 60:02d}"


def format_sets(done: int, total: int) -> str:
    """Format the set fraction as ``DD/TT``."""
    return f"{done:02d}/{total:02d}"


def phase_color(phase: Phase) -> str:
    """Return the terminal colour name used for *phase*."""
    return _PHASE_COLORS[phase]


def phase_label(phase: Phase) -> str:
    return phase.value
