"""Persist change records through an injected store.

:class:`SectionChangeRecorder` (sync) and :class:`AsyncSectionChangeRecorder`
(async) hand each record to the store one at a time, in the order given,
and tally what was created.  A store failure propagates immediately: the
remaining records are not attempted and records already created are left
in place.
"""

from __future__ import annotations

from collections.abc import Iterable

from docdelta.config import DocDeltaConfig
from docdelta.models import (
    ChangeCounts,
    ChangeRecordCreated,
    ChangeRecordInput,
    ChangeType,
    DiffResult,
)
from docdelta.observability import MetricsHook, resolve_metrics
from docdelta.persistence.base import AsyncSectionChangesPersistence, SectionChangesPersistence

from .summary import build_summary


class _RecordState:
    """Mutable tallies shared by the sync and async recorders."""

    __slots__ = ("counts", "created")

    def __init__(self) -> None:
        self.counts = ChangeCounts()
        self.created: list[ChangeRecordCreated] = []

    def add(self, record: ChangeRecordInput, created: ChangeRecordCreated) -> None:
        self.counts.add(record.change_type)
        self.created.append(created)

    def result(self) -> DiffResult:
        total = self.counts.total
        return DiffResult(
            has_changes=total > 0,
            change_count=total,
            counts=self.counts,
            summary=build_summary(self.counts),
            records=self.created,
        )


class SectionChangeRecorder:
    """Synchronous recorder.

    Parameters
    ----------
    persistence:
        A :class:`~docdelta.persistence.SectionChangesPersistence` whose
        ``create_section_change(record)`` returns a :class:`ChangeRecordCreated`.
    config:
        Package configuration (used for the metrics hook).
    """

    def __init__(
        self,
        persistence: SectionChangesPersistence,
        config: DocDeltaConfig | None = None,
    ) -> None:
        self._store = persistence
        self._metrics = resolve_metrics(config)

    def record(self, records: Iterable[ChangeRecordInput]) -> DiffResult:
        """Persist *records* sequentially and return the tallied result."""
        state = _RecordState()
        for record in records:
            state.add(record, self._store.create_section_change(record))
        _emit_change_metrics(self._metrics, state.counts)
        return state.result()


class AsyncSectionChangeRecorder:
    """Asynchronous recorder.

    Mirrors :class:`SectionChangeRecorder`, awaiting each store call before
    issuing the next one.
    """

    def __init__(
        self,
        persistence: AsyncSectionChangesPersistence,
        config: DocDeltaConfig | None = None,
    ) -> None:
        self._store = persistence
        self._metrics = resolve_metrics(config)

    async def record(self, records: Iterable[ChangeRecordInput]) -> DiffResult:
        """Persist *records* sequentially and return the tallied result."""
        state = _RecordState()
        for record in records:
            state.add(record, await self._store.create_section_change(record))
        _emit_change_metrics(self._metrics, state.counts)
        return state.result()


def _emit_change_metrics(metrics: MetricsHook, counts: ChangeCounts) -> None:
    """Emit ``section_changes_total`` counters grouped by change type."""
    for change_type, count in (
        (ChangeType.UPDATE, counts.updated),
        (ChangeType.INSERT_AFTER, counts.inserted),
        (ChangeType.DELETE, counts.deleted),
    ):
        if count:
            metrics.increment(
                "docdelta.section_changes_total", count, tags={"change_type": change_type.value},
            )
