"""netinfo HTTP クライアント実装"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

import structlog

from hyphen_http import HttpClient, HttpClientError, HttpResponse, create_headers
from hyphen_toggle import PUBLIC_KEY_PREFIX

from .client import NetInfoClient
from .exceptions import NetInfoError, NetInfoErrorCodes
from .models import DEFAULT_BASE_URI, IPInfo, IPInfoError, NetInfoConfig, ip_info_from_dict

logger = structlog.stdlib.get_logger(__name__)


class HttpNetInfoClient(NetInfoClient):
    """net.info API を使った netinfo HTTP クライアント。"""

    def __init__(self, config: NetInfoConfig, http_client: HttpClient | None = None) -> None:
        if not config.api_key:
            raise NetInfoError(
                code=NetInfoErrorCodes.CONFIG_ERROR,
                message="API key is required",
            )
        if config.api_key.startswith(PUBLIC_KEY_PREFIX):
            raise NetInfoError(
                code=NetInfoErrorCodes.CONFIG_ERROR,
                message="the provided API key is a public API key; a non-public API key is required",
            )
        self._config = config
        self._base_uri = (config.base_uri or DEFAULT_BASE_URI).removesuffix("/")
        self._headers = create_headers(config.api_key)
        self._http = http_client or HttpClient(timeout_seconds=config.timeout_seconds)
        self._error_handler: Callable[[Exception], None] | None = None

    @property
    def base_uri(self) -> str:
        return self._base_uri

    def set_error_handler(self, handler: Callable[[Exception], None] | None) -> None:
        self._error_handler = handler

    def _emit_error(self, error: Exception) -> None:
        logger.warning("netinfo request failed", error=str(error))
        handler = self._error_handler
        if handler is None:
            return
        try:
            handler(error)
        except Exception:
            logger.exception("netinfo error handler raised", error=str(error))

    def _fail(self, code: str, message: str, cause: Exception | None = None) -> NetInfoError:
        error = NetInfoError(code=code, message=message, cause=cause)
        self._emit_error(error)
        return error

    def _decode(self, resp: HttpResponse, context: str) -> Any:
        if resp.status_code != 200:
            raise self._fail(
                NetInfoErrorCodes.HTTP_ERROR,
                f"failed to {context}: HTTP {resp.status_code}: {resp.status}",
            )
        try:
            return resp.json()
        except ValueError as e:
            raise self._fail(
                NetInfoErrorCodes.DECODE_ERROR,
                f"failed to unmarshal response: {e}",
                cause=e,
            ) from e

    async def get_ip_info(self, ip: str) -> IPInfo:
        try:
            resp = await self._http.get(f"{self._base_uri}/ip/{ip}", self._headers)
        except HttpClientError as e:
            raise self._fail(
                NetInfoErrorCodes.REQUEST_FAILED, f"failed to fetch ip info: {e}", cause=e
            ) from e
        data = self._decode(resp, "fetch ip info")
        try:
            return IPInfo.from_dict(data)
        except (AttributeError, KeyError, OverflowError, TypeError, ValueError) as e:
            raise self._fail(
                NetInfoErrorCodes.DECODE_ERROR, f"failed to unmarshal response: {e}", cause=e
            ) from e

    async def get_ip_infos(self, ips: Sequence[str]) -> list[IPInfo | IPInfoError]:
        if not ips:
            raise self._fail(
                NetInfoErrorCodes.VALIDATION_ERROR,
                "the provided IPs array is invalid. It should be a non-empty array of strings",
            )
        try:
            resp = await self._http.post(f"{self._base_uri}/ip", list(ips), self._headers)
        except HttpClientError as e:
            raise self._fail(
                NetInfoErrorCodes.REQUEST_FAILED, f"failed to fetch ip infos: {e}", cause=e
            ) from e
        data = self._decode(resp, "fetch ip infos")
        try:
            return [ip_info_from_dict(item) for item in data.get("data") or []]
        except (AttributeError, KeyError, OverflowError, TypeError, ValueError) as e:
            raise self._fail(
                NetInfoErrorCodes.DECODE_ERROR, f"failed to unmarshal response: {e}", cause=e
            ) from e
