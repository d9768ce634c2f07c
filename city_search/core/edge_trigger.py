"""Edge Trigger - turns level visibility reports of the end-of-list sentinel into edges."""

from dataclasses import dataclass


@dataclass
class EdgeTrigger:
    """Fires once per not-near-end -> near-end crossing."""

    near_end: bool = False

    def rising(self, near_end: bool) -> bool:
        """True when near_end would be a crossing. Records nothing."""
        return near_end and not self.near_end

    def observe(self, near_end: bool) -> bool:
        fired = self.rising(near_end)
        self.near_end = near_end
        return fired

    def rearm(self) -> None:
        # the next near-end report fires again
        self.near_end = False
