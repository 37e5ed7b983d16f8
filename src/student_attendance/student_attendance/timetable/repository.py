from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import TimetableClass


class TimetableRepository(Protocol):
    def list_for_batch(self, batch: str, *, day: Optional[str] = None) -> Sequence[TimetableClass]:
        """Candidate entries for a batch (exact or batch-wide prefix), ordered by start_time."""

        raise NotImplementedError
