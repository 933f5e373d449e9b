"""Short-lived "Copied!" acknowledgments for the export buttons."""

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

DEFAULT_FEEDBACK_SECONDS = 2.0


@dataclass
class CopyAcknowledgment:
    """A restartable deadline that marks a copy action as recently done.

    Triggering again restarts the window; :meth:`cancel` ends it early. The
    acknowledgment expires on its own once ``duration`` seconds have passed,
    which the UI picks up on its next timer tick.

    Attributes:
        duration: Length of the acknowledgment window in seconds
        clock: Monotonic time source (injectable for tests)
        expires_at: Deadline of the current window, None when idle
    """

    duration: float = DEFAULT_FEEDBACK_SECONDS
    clock: Callable[[], float] = field(default=time.monotonic, repr=False)
    expires_at: float | None = None

    def trigger(self, now: float | None = None) -> None:
        """Start (or restart) the acknowledgment window."""
        now = self.clock() if now is None else now
        self.expires_at = now + self.duration

    def is_active(self, now: float | None = None) -> bool:
        """Check whether the window is still open, clearing it once expired."""
        if self.expires_at is None:
            return False
        now = self.clock() if now is None else now
        if now >= self.expires_at:
            self.expires_at = None
            return False
        return True

    def cancel(self) -> None:
        """End the window immediately."""
        self.expires_at = None
