"""
core/request_processor.py
--------------------------

The single path every API call goes through.

A :class:`RequestProcessor` is bound to one origin and one
``httpx.AsyncClient``.  :meth:`RequestProcessor.process` sends exactly
one request per call and either returns the decoded JSON body or raises
one of the errors defined in :mod:`tranzakt.core.errors`:

* ``TransportError`` when no response was received at all;
* ``ApiError`` for any non-2xx response.  A body that does not have the
  error shape is turned into a synthesized ``ApiError`` so callers always
  get the same four fields;
* ``MalformedResponseError`` for a 2xx response that is not JSON, or a
  body httpx cannot decode.

Redirects are followed and success is judged on the final response.
There are no retries and no timeout other than the transport default
(or the ``timeout`` set on the client configuration).
"""

from __future__ import annotations

import time
from typing import Any, Dict, Literal, Optional

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from tranzakt.core.config import ClientConfig
from tranzakt.core.errors import ApiError, MalformedResponseError, TransportError
from tranzakt.logging_config import log_http_request
from tranzakt.schemas.common import ApiErrorBody

HttpMethod = Literal["GET", "POST", "PUT", "PATCH", "DELETE"]


class RequestIntent(BaseModel):
    """Full description of one outbound call, built fresh per request."""

    url: str
    method: HttpMethod = "GET"
    headers: Dict[str, str] = Field(default_factory=dict)
    body: Any = None

    model_config = ConfigDict(frozen=True)


def _type_tag(reason: str) -> str:
    # "Not Found" -> "NotFound"
    tag = "".join(word[:1].upper() + word[1:] for word in reason.replace("-", " ").split())
    return tag or "HttpError"


def normalize_error(response: httpx.Response) -> ApiError:
    """Turn a non-2xx response into an :class:`ApiError`."""
    text = response.text.strip()
    try:
        body = response.json()
    except ValueError:
        body = None

    if body is not None:
        try:
            parsed = ApiErrorBody.model_validate(body)
        except ValidationError:
            parsed = None
        if parsed is not None:
            return ApiError(parsed.status, parsed.message, parsed.type, parsed.errors, body=body)

    reason = response.reason_phrase or ""
    message = text or reason or f"HTTP {response.status_code}"
    type_tag = _type_tag(reason)
    if isinstance(body, dict):
        if isinstance(body.get("message"), str):
            message = body["message"]
        if isinstance(body.get("type"), str):
            type_tag = body["type"]
    return ApiError(
        response.status_code,
        message,
        type_tag,
        [text] if text else [],
        body=body,
    )


class RequestProcessor:
    """Executes :class:`RequestIntent` objects against a fixed origin.

    The processor owns its ``httpx.AsyncClient``; close it with
    :meth:`aclose` or use the processor as an async context manager.
    Creating one performs no network I/O.
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.config = config
        client_kwargs: Dict[str, Any] = {"base_url": config.base_url, "follow_redirects": True}
        if config.timeout is not None:
            client_kwargs["timeout"] = config.timeout
        if transport is not None:
            client_kwargs["transport"] = transport
        self._client = httpx.AsyncClient(**client_kwargs)

    @property
    def base_url(self) -> str:
        return self.config.base_url

    async def process(self, intent: RequestIntent) -> Any:
        """Send ``intent`` once and return the decoded JSON body.

        :raises TransportError: no response was received
        :raises ApiError: the response status was not 2xx
        :raises MalformedResponseError: a 2xx body was not valid JSON, or the
            body could not be decoded
        """
        request = self._client.build_request(
            intent.method,
            intent.url,
            headers=intent.headers,
            json=intent.body,
        )
        url = str(request.url)
        log_http_request(intent.method, url, headers=intent.headers, json_body=intent.body)
        start_time = time.perf_counter()
        try:
            response = await self._client.send(request)
        except httpx.DecodingError as exc:
            raise MalformedResponseError(
                f"{intent.method} {url} returned an undecodable body: {exc}", status=None, text=""
            ) from exc
        except httpx.RequestError as exc:
            raise TransportError(
                f"{intent.method} {url} failed: {exc}", method=intent.method, url=url
            ) from exc
        duration_ms = (time.perf_counter() - start_time) * 1000
        log_http_request(intent.method, url, status=response.status_code, duration_ms=duration_ms)

        if not response.is_success:
            raise normalize_error(response)
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise MalformedResponseError(
                f"{intent.method} {url} returned a non-JSON body",
                status=response.status_code,
                text=response.text,
            ) from exc

    async def aclose(self) -> None:
        """Close the underlying HTTPX client and release connections."""
        await self._client.aclose()

    async def __aenter__(self) -> "RequestProcessor":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
