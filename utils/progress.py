"""Console progress reporting for long inputs."""

from typing import Callable, Optional

import click


class ProgressTracker:
    """Done/total counter for one step of a single counting pass."""

    def __init__(self, total: int, step_name: str = ""):
        self.total = total
        self.done = 0
        self.step_name = step_name

    def update(self, done: int):
        """Set absolute progress (never goes backwards)."""
        self.done = max(self.done, min(done, self.total))

    @property
    def finished(self) -> bool:
        return self.done >= self.total

    @property
    def percent(self) -> float:
        return 100.0 if self.total == 0 else self.done * 100 / self.total

    def format_progress(self) -> str:
        """Format: [step] done/total (percent%)"""
        prefix = f"[{self.step_name}] " if self.step_name else ""
        return f"{prefix}{self.done}/{self.total} ({self.percent:.0f}%)"

    def __str__(self) -> str:
        return self.format_progress()


def format_duration(seconds: float) -> str:
    """Format seconds as "0.35s", "42s", "1m 5s" or "1h 2m 5s"."""
    if seconds < 0:
        return "N/A"
    if seconds < 10:
        return f"{seconds:.2f}s"

    minutes, secs = divmod(int(seconds), 60)
    hours, minutes = divmod(minutes, 60)
    if hours:
        return f"{hours}h {minutes}m {secs}s"
    if minutes:
        return f"{minutes}m {secs}s"
    return f"{secs}s"


class ProgressCallback:
    """Progress callback that redraws one console line per step.

    Compatible with FrequencyCounter.count_file(on_progress=...).
    """

    def __init__(self, print_interval: int = 1000, err: bool = False):
        """
        Args:
            print_interval: Redraw every N lines (0 = every line)
            err: Echo to stderr instead of stdout
        """
        self.print_interval = print_interval
        self.err = err
        self._trackers: dict[str, ProgressTracker] = {}
        self._next_print: dict[str, int] = {}

    def tracker(self, step_name: str) -> Optional[ProgressTracker]:
        return self._trackers.get(step_name)

    def __call__(self, step_name: str, done: int, total: int):
        tracker = self._trackers.get(step_name)
        if tracker is None or tracker.total != total:
            tracker = self._trackers[step_name] = ProgressTracker(total, step_name)
            self._next_print[step_name] = max(self.print_interval, 1)

        tracker.update(done)
        if tracker.done < self._next_print[step_name] and not tracker.finished:
            return

        self._next_print[step_name] = tracker.done + max(self.print_interval, 1)
        click.echo(f"\r  {tracker}", nl=tracker.finished, err=self.err)


def create_progress_callback(print_every: int = 1000) -> Callable[[str, int, int], None]:
    """Create a console progress callback for line counting."""
    return ProgressCallback(print_interval=print_every)
