"""Section diff engine.

Exports
-------
match_sections
    Pair old and new sections (exact, then fuzzy title matching).
classify_changes
    Turn a pairing into update / insert-after / delete records.
SectionChangeRecorder / AsyncSectionChangeRecorder
    Persist records through an injected store.
build_summary
    Render change counts as a short sentence.
plan_section_changes
    Diff two documents without persisting.
create_section_changes_from_import
    Diff two documents and persist the result (async).
create_section_changes_from_import_sync
    Same, with a synchronous store.
"""

from .classifier import classify_changes
from .engine import (
    create_section_changes_from_import,
    create_section_changes_from_import_sync,
    plan_section_changes,
)
from .levenshtein import levenshtein
from .matcher import match_sections
from .recorder import AsyncSectionChangeRecorder, SectionChangeRecorder
from .summary import NO_CHANGES, build_summary

__all__ = [
    "NO_CHANGES",
    "AsyncSectionChangeRecorder",
    "SectionChangeRecorder",
    "build_summary",
    "classify_changes",
    "create_section_changes_from_import",
    "create_section_changes_from_import_sync",
    "levenshtein",
    "match_sections",
    "plan_section_changes",
]
