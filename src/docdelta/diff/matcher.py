"""Pair sections of an old and a new document version.

Matching runs in two passes over the initially unmatched sections:

1. **Exact** -- every old section, in order, takes the earliest unmatched
   new section with an identical title.  The two preambles (title ``None``)
   pair with each other here.
2. **Fuzzy** -- every still-unmatched titled old section, in order, takes
   the unmatched titled new section whose title is closest by Levenshtein
   distance, provided that distance is strictly below the threshold.  Ties
   go to the earliest new section.  Preambles never take part.

Whatever is left over becomes a delete (old) or insert (new) candidate.
"""

from __future__ import annotations

from docdelta.config import DEFAULT_FUZZY_THRESHOLD
from docdelta.models import MatchKind, MatchResult, Section, SectionMatch

from .levenshtein import levenshtein


def _exact_pass(
    old: list[Section],
    new: list[Section],
    matched_new: set[int],
) -> dict[int, SectionMatch]:
    pairs: dict[int, SectionMatch] = {}
    for old_section in old:
        for new_section in new:
            if new_section.order in matched_new:
                continue
            if new_section.title == old_section.title:
                pairs[old_section.order] = SectionMatch(
                    old=old_section, new=new_section, kind=MatchKind.EXACT,
                )
                matched_new.add(new_section.order)
                break
    return pairs


def _fuzzy_pass(
    old: list[Section],
    new: list[Section],
    matched_old: set[int],
    matched_new: set[int],
    threshold: int,
) -> dict[int, SectionMatch]:
    pairs: dict[int, SectionMatch] = {}
    for old_section in old:
        if old_section.order in matched_old or old_section.title is None:
            continue

        best: Section | None = None
        best_distance = threshold
        for new_section in new:
            if new_section.order in matched_new or new_section.title is None:
                continue
            distance = levenshtein(old_section.title, new_section.title, limit=best_distance)
            # Strict comparison keeps the earliest candidate on ties.
            if distance < best_distance:
                best, best_distance = new_section, distance

        if best is not None:
            pairs[old_section.order] = SectionMatch(
                old=old_section, new=best, kind=MatchKind.FUZZY, distance=best_distance,
            )
            matched_new.add(best.order)
    return pairs


def match_sections(
    old: list[Section],
    new: list[Section],
    *,
    threshold: int = DEFAULT_FUZZY_THRESHOLD,
) -> MatchResult:
    """Pair *old* sections with *new* sections.

    Parameters
    ----------
    old, new:
        Section lists in document order, as produced by
        :func:`~docdelta.document.parse_sections`.
    threshold:
        Exclusive upper bound on the title edit distance accepted by the
        fuzzy pass.

    Returns
    -------
    MatchResult
        Pairs ordered by the old section's position, plus the unmatched
        sections of each side in document order.  Every section appears
        in at most one pair.
    """
    matched_new: set[int] = set()
    pairs = _exact_pass(old, new, matched_new)
    pairs.update(_fuzzy_pass(old, new, set(pairs), matched_new, threshold))

    return MatchResult(
        pairs=[pairs[order] for order in sorted(pairs)],
        unmatched_old=[s for s in old if s.order not in pairs],
        unmatched_new=[s for s in new if s.order not in matched_new],
    )
