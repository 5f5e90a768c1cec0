"""Metrics hook protocol and no-op default implementation.

docdelta reports a handful of data points per diff run.  Without a
configured backend a :class:`NoopMetricsHook` is used, so call-sites never
guard against a missing hook.

Emitted metric names:

* ``docdelta.section_changes_total``      -- counter, tag ``change_type``
* ``docdelta.diff_duration_ms``           -- timing
* ``docdelta.persistence_requests_total`` -- counter, tag ``status``
* ``docdelta.document_sections``          -- gauge, sections in the new version
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class MetricsHook(Protocol):
    """Protocol that any metrics backend must satisfy.

    Tags are string key/value pairs; backends map them onto whatever
    labelling scheme they support.
    """

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Increment the counter *name* by *value*."""
        ...

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Record a duration of *ms* milliseconds under *name*."""
        ...

    def gauge(
        self,
        name: str,
        value: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Set the gauge *name* to *value*."""
        ...


class NoopMetricsHook:
    """Metrics backend that discards every data point."""

    __slots__ = ()

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass

    def gauge(
        self,
        name: str,
        value: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass


def resolve_metrics(config: Any | None) -> MetricsHook:
    """Return the metrics hook configured on *config*, or a no-op hook."""
    hook = getattr(config, "metrics", None)
    return hook if hook is not None else NoopMetricsHook()
