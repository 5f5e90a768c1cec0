"""Persistence protocols for section change records, plus in-memory stores."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from docdelta.models import ChangeRecordCreated, ChangeRecordInput


@runtime_checkable
class SectionChangesPersistence(Protocol):
    """A store that durably creates section change records.

    ``create_section_change`` returns the created record with its assigned
    identifier, or raises.  Callers never retry a failed call.
    """

    def create_section_change(self, record: ChangeRecordInput) -> ChangeRecordCreated:
        ...


@runtime_checkable
class AsyncSectionChangesPersistence(Protocol):
    """Asynchronous counterpart of :class:`SectionChangesPersistence`."""

    async def create_section_change(self, record: ChangeRecordInput) -> ChangeRecordCreated:
        ...


class InMemorySectionChangesPersistence:
    """Keeps created records in a list and hands out sequential ids from 1."""

    def __init__(self) -> None:
        self.created: list[ChangeRecordCreated] = []

    def create_section_change(self, record: ChangeRecordInput) -> ChangeRecordCreated:
        created = ChangeRecordCreated(id=len(self.created) + 1, record=record)
        self.created.append(created)
        return created

    def for_draft(self, draft_id: int) -> list[ChangeRecordCreated]:
        return [c for c in self.created if c.record.draft_id == draft_id]


class AsyncInMemorySectionChangesPersistence(InMemorySectionChangesPersistence):
    """Awaitable variant of :class:`InMemorySectionChangesPersistence`."""

    async def create_section_change(  # type: ignore[override]
        self, record: ChangeRecordInput,
    ) -> ChangeRecordCreated:
        return super().create_section_change(record)
