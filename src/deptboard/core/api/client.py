"""
Async REST client for the department backend.

One :class:`ResourceClient` per resource (users, tasks, comments), all
sharing a single ``httpx.AsyncClient``. Every call issues exactly one request:

    GET    /<resource>?limit=N&sort=field&_t=<ms>[&filters]  -> {"data": [...]}
    GET    /<resource>/{id}                                  -> record
    POST   /<resource>          (JSON body)                  -> created record
    PUT    /<resource>/{id}     (JSON body)                  -> updated record
    DELETE /<resource>/{id}                                  -> empty body

Responses are handled uniformly by :func:`handle_response`: a non-2xx status
raises :class:`ApiError` carrying the status and body text, a JSON body is
parsed, anything else resolves to ``None``.

Example:
    >>> async with DeskApi.from_config(DeskConfig()) as api:
    ...     page = await api.tasks.list(status="pending")
    ...     print(len(page.data))
"""

from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from types import TracebackType
from typing import Any, Generic

import httpx
from pydantic import BaseModel, ValidationError

from deptboard.core.api.models import Comment, ListPage, RecordT, Task, User
from deptboard.core.config.models import DeskConfig, LimitsConfig
from deptboard.core.errors import ApiError

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


def cache_token() -> int:
    """Millisecond timestamp appended to reads so no cache serves them."""
    return int(time.time() * 1000)


def utc_timestamp() -> str:
    """Current UTC time in the ``2024-05-01T09:30:00.000Z`` form."""
    stamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds")
    return stamp.replace("+00:00", "Z")


def handle_response(response: httpx.Response) -> Any:
    """
    Turn a response into its payload.

    Args:
        response: Completed httpx response

    Returns:
        Parsed JSON for JSON responses with a body, otherwise None

    Raises:
        ApiError: On a non-2xx status or an unparseable JSON body
    """
    if not response.is_success:
        raise ApiError(response.status_code, response.text)

    content_type = response.headers.get("content-type", "")
    if "application/json" in content_type and response.content:
        try:
            return response.json()
        except ValueError as e:
            raise ApiError(response.status_code, response.text) from e

    return None


class ResourceClient(Generic[RecordT]):
    """
    CRUD wrapper for one REST resource.

    Attributes:
        resource: Resource path segment (e.g. "tasks")
        model: Record model used to parse responses
        limit: Default result cap for list requests
        sort: Default sort order for list requests (None sends no sort)
    """

    def __init__(
        self,
        http: httpx.AsyncClient,
        resource: str,
        model: type[RecordT],
        *,
        limit: int,
        sort: str | None = None,
    ) -> None:
        self._http = http
        self.resource = resource
        self.model = model
        self.limit = limit
        self.sort = sort

    async def list(self, **filters: Any) -> ListPage[RecordT]:
        """
        Fetch the collection.

        Args:
            **filters: Extra query parameters; they override the default
                ``limit`` and ``sort``. None values are dropped.

        Returns:
            ListPage with the parsed records
        """
        params: dict[str, Any] = {"limit": self.limit}
        if self.sort:
            params["sort"] = self.sort
        params["_t"] = cache_token()
        params.update({key: value for key, value in filters.items() if value is not None})

        payload = await self._request("GET", self.resource, params=params)
        return self._validate(ListPage[self.model], payload or {})  # type: ignore[name-defined,valid-type]

    async def get(self, record_id: str) -> RecordT:
        """Fetch a single record by id."""
        payload = await self._request(
            "GET", f"{self.resource}/{record_id}", params={"_t": cache_token()}
        )
        if payload is None:
            raise ApiError(None, f"Empty response for {self.resource}/{record_id}")
        return self._validate(self.model, payload)

    async def create(self, fields: dict[str, Any]) -> RecordT | None:
        """Create a record; returns the server's copy when it sends one."""
        payload = await self._request("POST", self.resource, body=fields)
        return self._validate(self.model, payload) if payload else None

    async def update(self, record_id: str, fields: dict[str, Any]) -> RecordT | None:
        """Replace a record's fields; returns the server's copy when it sends one."""
        payload = await self._request("PUT", f"{self.resource}/{record_id}", body=fields)
        return self._validate(self.model, payload) if payload else None

    async def delete(self, record_id: str) -> None:
        """Delete a record."""
        await self._request("DELETE", f"{self.resource}/{record_id}", mutating=True)

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
        mutating: bool = False,
    ) -> Any:
        headers = JSON_HEADERS if (body is not None or mutating) else None
        logger.debug("%s %s params=%s", method, path, params)

        try:
            response = await self._http.request(
                method, path, params=params, json=body, headers=headers
            )
        except httpx.HTTPError as e:
            raise ApiError(None, f"{method} {path} failed: {e}") from e

        logger.debug("%s %s -> %s", method, path, response.status_code)
        return handle_response(response)

    def _validate(self, schema: type[BaseModel], payload: Any) -> Any:
        try:
            return schema.model_validate(payload)
        except ValidationError as e:
            raise ApiError(
                None, f"Unexpected {self.resource} payload: {e.error_count()} validation error(s)"
            ) from e


class CommentClient(ResourceClient[Comment]):
    """Comment resource; creation is stamped with the submission time."""

    async def create(self, fields: dict[str, Any]) -> Comment | None:
        return await super().create({**fields, "created_at": utc_timestamp()})


class DeskApi:
    """
    The three resource clients over one HTTP connection pool.

    Example:
        >>> api = DeskApi.from_config(DeskConfig(base_url="http://desk.local"))
        >>> api.tasks.sort
        'due_date'
    """

    def __init__(self, http: httpx.AsyncClient, limits: LimitsConfig | None = None) -> None:
        limits = limits or LimitsConfig()
        self.http = http
        self.users: ResourceClient[User] = ResourceClient(http, "users", User, limit=limits.users)
        self.tasks: ResourceClient[Task] = ResourceClient(
            http, "tasks", Task, limit=limits.tasks, sort="due_date"
        )
        self.comments: ResourceClient[Comment] = CommentClient(
            http, "comments", Comment, limit=limits.comments, sort="-created_at"
        )

    @classmethod
    def from_config(
        cls,
        config: DeskConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> DeskApi:
        """
        Build a client for the configured backend.

        Args:
            config: Loaded configuration
            transport: Optional httpx transport (tests pass a mock or ASGI transport)

        Returns:
            DeskApi bound to ``config.api_url``
        """
        http = httpx.AsyncClient(
            base_url=f"{config.api_url}/",
            timeout=config.request_timeout,
            transport=transport,
        )
        return cls(http, config.limits)

    async def aclose(self) -> None:
        await self.http.aclose()

    async def __aenter__(self) -> DeskApi:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()


__all__ = [
    "CommentClient",
    "DeskApi",
    "ResourceClient",
    "cache_token",
    "handle_response",
    "utc_timestamp",
]
