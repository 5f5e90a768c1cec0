"""Configuration for docdelta.

:class:`DocDeltaConfig` is a dataclass that captures every tuneable knob
exposed by the package.  Instances are accepted by the parser, the diff
entry points, the recorders and the HTTP persistence adapters.  Every entry
point also works with ``config=None``, in which case the defaults below
apply.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any

DEFAULT_FUZZY_THRESHOLD: int = 3
"""Titles whose edit distance is strictly below this value are paired."""


@dataclass
class DocDeltaConfig:
    """Complete configuration for the section diff engine.

    Parameters
    ----------
    fuzzy_threshold:
        Exclusive upper bound on the Levenshtein distance between two
        section titles for the fuzzy matching pass.  With the default of
        ``3`` a distance of 2 matches and a distance of 3 does not.  The
        distance is not weighted by title length.
    skip_fenced_code:
        Do not treat ``#`` lines inside fenced code blocks (```` ``` ```` or
        ``~~~``) as headings.
    parse_front_matter_yaml:
        Decode the front matter block with ``yaml.safe_load``.  When
        disabled, :attr:`FrontMatter.data` is always ``None``.
    metrics:
        Optional :class:`~docdelta.observability.MetricsHook` backend.
    debug_dump_diff:
        Write the planned change records to *stderr* as JSON.
    api_base_url:
        Root URL of the section-change store used by the HTTP adapters.
    api_token:
        Bearer token for the HTTP adapters.  Never logged.
    timeout_seconds:
        HTTP request timeout in seconds.
    """

    # ── Diff ────────────────────────────────────────────────────────────
    fuzzy_threshold: int = DEFAULT_FUZZY_THRESHOLD

    # ── Parsing ─────────────────────────────────────────────────────────
    skip_fenced_code: bool = True

    parse_front_matter_yaml: bool = True

    # ── Observability ──────────────────────────────────────────────────
    metrics: Any | None = None

    # ── Debug ───────────────────────────────────────────────────────────
    debug_dump_diff: bool = False

    # ── HTTP persistence ───────────────────────────────────────────────
    api_base_url: str = "http://localhost:8034/api"

    api_token: str = ""

    timeout_seconds: float = 30.0

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        from urllib.parse import urlparse

        parsed = urlparse(self.api_base_url)
        if parsed.scheme == "http" and parsed.hostname not in (
            "localhost",
            "127.0.0.1",
            "::1",
        ):
            raise ValueError(
                f"api_base_url uses insecure HTTP for non-local host '{parsed.hostname}'. "
                "Use HTTPS to protect your API token, or target localhost for testing."
            )

        if self.fuzzy_threshold < 1:
            raise ValueError(f"fuzzy_threshold must be >= 1, got {self.fuzzy_threshold}")
        if self.timeout_seconds <= 0:
            raise ValueError(f"timeout_seconds must be > 0, got {self.timeout_seconds}")

    def __repr__(self) -> str:
        """Mask the API token to prevent accidental credential leakage."""
        parts: list[str] = []
        for f in dataclasses.fields(self):
            val = getattr(self, f.name)
            if f.name == "api_token":
                masked = f"...{val[-4:]}" if len(val) >= 4 else "****"
                parts.append(f"api_token='{masked}'")
            else:
                parts.append(f"{f.name}={val!r}")
        return f"DocDeltaConfig({', '.join(parts)})"
