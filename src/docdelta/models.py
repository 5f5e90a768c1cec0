"""Public data models for docdelta.

Every type the public API hands out lives here: the parsed section model,
the match result produced between two section lists, the change records
handed to persistence, and the final :class:`DiffResult`.  All types are
plain dataclasses; value types are frozen so they compare and hash by
content.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class ChangeType(str, Enum):
    """Section change types recorded by the diff engine."""

    UPDATE = "update"
    """A section present in both versions whose content changed."""

    INSERT_AFTER = "insert-after"
    """A section only present in the new version."""

    DELETE = "delete"
    """A section only present in the old version."""


class MatchKind(str, Enum):
    """How an old/new section pair was established."""

    EXACT = "exact"
    """Identical titles (including two preambles)."""

    FUZZY = "fuzzy"
    """Titles within the configured edit-distance threshold."""


# ---------------------------------------------------------------------------
# Parsed document
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Section:
    """A contiguous heading-delimited block of a document.

    Attributes
    ----------
    title:
        Heading text, or ``None`` for the preamble.
    level:
        Heading depth (1-6); ``0`` for the preamble.
    raw_content:
        The section text exactly as it appears in the source, including the
        heading line and any trailing blank lines.
    order:
        Position of the section in its document; the preamble is ``0``.
    """

    title: str | None
    level: int
    raw_content: str
    order: int

    @property
    def is_preamble(self) -> bool:
        return self.title is None

    @property
    def path(self) -> str:
        """Stable address of this section within its document."""
        return f"/sections/{self.order}"

    @property
    def body(self) -> str:
        """The section content with its heading line removed."""
        if self.title is None:
            return self.raw_content
        _, _, rest = self.raw_content.partition("\n")
        return rest


@dataclass(frozen=True)
class FrontMatter:
    """A leading ``---`` delimited metadata block.

    Attributes
    ----------
    raw:
        Text between the two delimiter lines, without the delimiters.
    data:
        The decoded YAML mapping, or ``None`` when decoding was disabled,
        failed, or produced something other than a mapping.
    """

    raw: str
    data: dict[str, Any] | None = None


@dataclass
class ParsedDocument:
    """A document split into front matter and ordered sections.

    ``sections[0]`` is always the preamble.
    """

    front_matter: FrontMatter | None
    sections: list[Section]

    @property
    def preamble(self) -> Section:
        return self.sections[0]

    @property
    def titled_sections(self) -> list[Section]:
        return self.sections[1:]


# ---------------------------------------------------------------------------
# Matching
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SectionMatch:
    """An old section paired with its counterpart in the new document."""

    old: Section
    new: Section
    kind: MatchKind
    distance: int = 0


@dataclass
class MatchResult:
    """Outcome of pairing two section lists.

    Attributes
    ----------
    pairs:
        Matched sections, ordered by the old section's position.
    unmatched_old:
        Old sections without a counterpart (delete candidates).
    unmatched_new:
        New sections without a counterpart (insert candidates).
    """

    pairs: list[SectionMatch] = field(default_factory=list)
    unmatched_old: list[Section] = field(default_factory=list)
    unmatched_new: list[Section] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Change records
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ChangeRecordInput:
    """A section change ready to be persisted.

    Attributes
    ----------
    draft_id, doc_id:
        The draft the change belongs to and the document it was derived from.
    change_type:
        One of :class:`ChangeType`.
    section_title:
        Title of the affected section (``None`` for the preamble).
    content:
        New section text for updates and inserts; the removed text for
        deletes.
    reference_section_title:
        For inserts, the title of the section the new one follows.
    path:
        ``/sections/<i>`` index into the old document of the affected
        section (updates, deletes) or of the insert anchor.
    base_content:
        The old section text for updates and deletes.
    """

    draft_id: int
    doc_id: int
    change_type: ChangeType
    section_title: str | None
    content: str
    reference_section_title: str | None = None
    path: str | None = None
    base_content: str | None = None

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON body used by the HTTP change store."""
        return {
            "draftId": self.draft_id,
            "docId": self.doc_id,
            "changeType": self.change_type.value,
            "sectionTitle": self.section_title,
            "content": self.content,
            "referenceSectionTitle": self.reference_section_title,
            "path": self.path,
            "baseContent": self.base_content,
        }


@dataclass(frozen=True)
class ChangeRecordCreated:
    """A change record after the store assigned it an identifier."""

    id: int | str
    record: ChangeRecordInput


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

@dataclass
class ChangeCounts:
    """Number of recorded changes per type."""

    updated: int = 0
    inserted: int = 0
    deleted: int = 0

    @property
    def total(self) -> int:
        return self.updated + self.inserted + self.deleted

    def add(self, change_type: ChangeType) -> None:
        if change_type is ChangeType.UPDATE:
            self.updated += 1
        elif change_type is ChangeType.INSERT_AFTER:
            self.inserted += 1
        else:
            self.deleted += 1


@dataclass
class DiffResult:
    """Outcome of a diff-and-record run.

    Attributes
    ----------
    has_changes:
        ``True`` when at least one record was created.
    change_count:
        Number of records created.
    counts:
        Per-type breakdown of *change_count*.
    summary:
        Human-readable description, e.g. ``"2 sections updated, 1 section added"``.
    records:
        The created records, in creation order.
    """

    has_changes: bool
    change_count: int
    counts: ChangeCounts
    summary: str
    records: list[ChangeRecordCreated] = field(default_factory=list)
