"""Human-readable summaries of recorded section changes."""

from __future__ import annotations

from docdelta.models import ChangeCounts

NO_CHANGES = "No changes"


def _plural(count: int, verb: str) -> str:
    noun = "section" if count == 1 else "sections"
    return f"{count} {noun} {verb}"


def build_summary(counts: ChangeCounts) -> str:
    """Describe *counts* as e.g. ``"2 sections updated, 1 section added"``.

    Only non-zero counts are listed, always in the order updated, added,
    deleted.  Returns ``"No changes"`` when every count is zero.
    """
    parts = [
        _plural(count, verb)
        for count, verb in (
            (counts.updated, "updated"),
            (counts.inserted, "added"),
            (counts.deleted, "deleted"),
        )
        if count
    ]
    return ", ".join(parts) if parts else NO_CHANGES
