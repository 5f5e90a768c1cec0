"""HTTP-backed section change stores.

Each record is POSTed as JSON to
``{api_base_url}/drafts/{draft_id}/section-changes``; the ``id`` field of
the JSON response becomes the created record's identifier.

Requests are sent once.  Non-2xx responses map to typed
:class:`~docdelta.errors.DocDeltaPersistenceError` subclasses and transport
failures to :class:`~docdelta.errors.DocDeltaNetworkError`; the diff engine
surfaces both unchanged.
"""

from __future__ import annotations

from typing import Any

import httpx

from docdelta.config import DocDeltaConfig
from docdelta.errors import (
    DocDeltaAuthError,
    DocDeltaConflictError,
    DocDeltaNetworkError,
    DocDeltaNotFoundError,
    DocDeltaPermissionError,
    DocDeltaPersistenceError,
    DocDeltaServerError,
    DocDeltaValidationError,
)
from docdelta.models import ChangeRecordCreated, ChangeRecordInput
from docdelta.observability import get_logger, log_fields, resolve_metrics

log = get_logger("docdelta.persistence")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _headers(config: DocDeltaConfig) -> dict[str, str]:
    headers = {"Content-Type": "application/json", "Accept": "application/json"}
    if config.api_token:
        headers["Authorization"] = f"Bearer {config.api_token}"
    return headers


def _endpoint(record: ChangeRecordInput) -> str:
    return f"/drafts/{record.draft_id}/section-changes"


def _response_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return {}


def _raise_for_status(response: httpx.Response, path: str) -> None:
    """Raise the :class:`DocDeltaPersistenceError` matching a non-2xx response."""
    status = response.status_code
    body = _response_body(response)
    detail = body.get("message", response.text[:500]) if isinstance(body, dict) else response.text[:500]
    context = {"status_code": status, "path": path}

    if status in (400, 422):
        raise DocDeltaValidationError(
            message=f"Section change rejected on POST {path}: {detail}",
            context={**context, "body": body},
        )
    if status == 401:
        raise DocDeltaAuthError(
            message=f"Authentication failed on POST {path}: {detail}",
            context=context,
        )
    if status == 403:
        raise DocDeltaPermissionError(
            message=f"Permission denied on POST {path}: {detail}",
            context={**context, "operation": f"POST {path}"},
        )
    if status == 404:
        raise DocDeltaNotFoundError(
            message=f"Draft not found on POST {path}: {detail}",
            context=context,
        )
    if status == 409:
        raise DocDeltaConflictError(
            message=f"Conflict on POST {path}: {detail}",
            context=context,
        )
    if status >= 500:
        raise DocDeltaServerError(
            message=f"Server error {status} on POST {path}: {detail}",
            context={**context, "body": body},
        )
    raise DocDeltaPersistenceError(
        message=f"Unexpected status {status} on POST {path}: {detail}",
        context=context,
    )


def _created(response: httpx.Response, record: ChangeRecordInput, path: str) -> ChangeRecordCreated:
    body = _response_body(response)
    record_id = body.get("id") if isinstance(body, dict) else None
    if record_id is None:
        raise DocDeltaPersistenceError(
            message=f"Response to POST {path} carries no record id",
            context={"status_code": response.status_code, "path": path, "body": body},
        )
    return ChangeRecordCreated(id=record_id, record=record)


def _network_error(path: str, exc: httpx.HTTPError) -> DocDeltaNetworkError:
    return DocDeltaNetworkError(
        message=f"Network error on POST {path}: {exc}",
        context={"url": path},
        cause=exc,
    )


def _log_response(record: ChangeRecordInput, path: str, status: int) -> None:
    log.debug(
        "section change stored",
        extra=log_fields(
            "create_section_change",
            path=path,
            status=status,
            change_type=record.change_type.value,
        ),
    )


# ---------------------------------------------------------------------------
# Stores
# ---------------------------------------------------------------------------

class HttpSectionChangesPersistence:
    """Synchronous HTTP store.

    Parameters
    ----------
    config:
        Supplies ``api_base_url``, ``api_token`` and ``timeout_seconds``.
    client:
        Optional pre-built :class:`httpx.Client` (e.g. with a mock
        transport).  When omitted one is created and owned by the store.
    """

    def __init__(self, config: DocDeltaConfig, client: httpx.Client | None = None) -> None:
        self._config = config
        self._metrics = resolve_metrics(config)
        self._client = client or httpx.Client(
            base_url=config.api_base_url,
            headers=_headers(config),
            timeout=config.timeout_seconds,
        )

    def create_section_change(self, record: ChangeRecordInput) -> ChangeRecordCreated:
        path = _endpoint(record)
        try:
            response = self._client.post(path, json=record.to_payload())
        except httpx.HTTPError as exc:
            self._metrics.increment("docdelta.persistence_requests_total", tags={"status": "error"})
            raise _network_error(path, exc) from exc

        self._metrics.increment(
            "docdelta.persistence_requests_total", tags={"status": str(response.status_code)},
        )
        _log_response(record, path, response.status_code)
        if not response.is_success:
            _raise_for_status(response, path)
        return _created(response, record, path)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> HttpSectionChangesPersistence:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class AsyncHttpSectionChangesPersistence:
    """Asynchronous HTTP store.

    Mirrors :class:`HttpSectionChangesPersistence` on top of
    :class:`httpx.AsyncClient`.
    """

    def __init__(self, config: DocDeltaConfig, client: httpx.AsyncClient | None = None) -> None:
        self._config = config
        self._metrics = resolve_metrics(config)
        self._client = client or httpx.AsyncClient(
            base_url=config.api_base_url,
            headers=_headers(config),
            timeout=config.timeout_seconds,
        )

    async def create_section_change(self, record: ChangeRecordInput) -> ChangeRecordCreated:
        path = _endpoint(record)
        try:
            response = await self._client.post(path, json=record.to_payload())
        except httpx.HTTPError as exc:
            self._metrics.increment("docdelta.persistence_requests_total", tags={"status": "error"})
            raise _network_error(path, exc) from exc

        self._metrics.increment(
            "docdelta.persistence_requests_total", tags={"status": str(response.status_code)},
        )
        _log_response(record, path, response.status_code)
        if not response.is_success:
            _raise_for_status(response, path)
        return _created(response, record, path)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> AsyncHttpSectionChangesPersistence:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
