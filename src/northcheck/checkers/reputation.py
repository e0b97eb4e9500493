from __future__ import annotations

import logging
from typing import Any

import httpx

from northcheck.errors import APIError, NetworkError, RequestTimeout, UnexpectedResponse
from northcheck.identity import user_agent as platform_user_agent
from northcheck.models import CheckRequest, FileCheck, UrlCheck

LOGGER = logging.getLogger(__name__)


class ReputationChecker:
    """Client for the public link and file-hash reputation checkers.

    Every call makes exactly one POST. Failures are raised as the matching
    ``CheckError`` subclass; nothing is retried or cached.
    """

    _ORIGIN = "https://nordvpn.com"

    def __init__(
        self,
        link_endpoint: str,
        file_endpoint: str,
        timeout_seconds: float = 30.0,
        user_agent: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._link_endpoint = link_endpoint
        self._file_endpoint = file_endpoint
        self._timeout_seconds = timeout_seconds
        self._user_agent = user_agent or platform_user_agent()
        self._transport = transport

    @property
    def headers(self) -> dict[str, str]:
        return {
            "accept": "application/json",
            "accept-language": "en-US,en;q=0.9",
            "content-type": "application/json",
            "origin": self._ORIGIN,
            "referer": f"{self._ORIGIN}/",
            "user-agent": self._user_agent,
        }

    def endpoint_for(self, request: CheckRequest) -> str:
        if isinstance(request, UrlCheck):
            return self._link_endpoint
        if isinstance(request, FileCheck):
            return self._file_endpoint
        raise TypeError(f"Unsupported check request: {request!r}")

    async def check(self, request: CheckRequest) -> Any:
        endpoint = self.endpoint_for(request)
        timeout = httpx.Timeout(self._timeout_seconds)
        async with httpx.AsyncClient(timeout=timeout, transport=self._transport) as client:
            LOGGER.debug("POST %s", endpoint)
            try:
                response = await client.post(
                    endpoint, json=request.payload(), headers=self.headers
                )
            except httpx.TimeoutException as exc:
                raise RequestTimeout(
                    f"Request timed out after {self._timeout_seconds:g} seconds."
                ) from exc
            except httpx.NetworkError as exc:
                raise NetworkError(f"Could not reach {httpx.URL(endpoint).host}.") from exc

        LOGGER.debug("Response %s from %s", response.status_code, endpoint)
        if not response.is_success:
            raise APIError(
                status_code=response.status_code,
                reason=response.reason_phrase,
                body=self._decode_error_body(response),
            )

        try:
            return response.json()
        except ValueError as exc:
            raise UnexpectedResponse("Checker returned a response that is not JSON.") from exc

    @staticmethod
    def _decode_error_body(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return response.text
