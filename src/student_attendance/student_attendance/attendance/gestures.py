from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import AttendanceStatus, Gesture

# Options offered when a class card is tapped.
DIALOG_OPTIONS = ("present", "absent", "swapped", "cancelled")

_SWIPE_STATUS = {
    Gesture.SWIPE_RIGHT: AttendanceStatus.PRESENT,
    Gesture.SWIPE_LEFT: AttendanceStatus.ABSENT,
}


@dataclass(frozen=True)
class GestureOutcome:
    status: Optional[AttendanceStatus] = None
    show_options: bool = False

    @property
    def writes(self) -> bool:
        return self.status is not None

    def to_dict(self) -> dict:
        return {
            "status": self.status.value if self.status else None,
            "show_options": self.show_options,
            "options": list(DIALOG_OPTIONS) if self.show_options else [],
        }


def resolve_gesture(gesture: Gesture, *, already_marked: bool) -> GestureOutcome:
    """Map a card interaction to an action.

    Swipes mark a class that has no status yet and are ignored afterwards;
    a tap always opens the options dialog.
    """

    if gesture == Gesture.TAP:
        return GestureOutcome(show_options=True)
    if already_marked:
        return GestureOutcome()
    return GestureOutcome(status=_SWIPE_STATUS[gesture])
