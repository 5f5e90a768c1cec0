"""Stores for section change records.

Exports
-------
SectionChangesPersistence / AsyncSectionChangesPersistence
    Protocols consumed by the diff engine.
InMemorySectionChangesPersistence / AsyncInMemorySectionChangesPersistence
    List-backed stores for tests and dry runs.
HttpSectionChangesPersistence / AsyncHttpSectionChangesPersistence
    JSON-over-HTTP stores built on httpx.
"""

from .base import (
    AsyncInMemorySectionChangesPersistence,
    AsyncSectionChangesPersistence,
    InMemorySectionChangesPersistence,
    SectionChangesPersistence,
)
from .http import AsyncHttpSectionChangesPersistence, HttpSectionChangesPersistence

__all__ = [
    "AsyncHttpSectionChangesPersistence",
    "AsyncInMemorySectionChangesPersistence",
    "AsyncSectionChangesPersistence",
    "HttpSectionChangesPersistence",
    "InMemorySectionChangesPersistence",
    "SectionChangesPersistence",
]
