"""link HTTP クライアント実装"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from datetime import datetime, timezone
from typing import Any

import structlog

from hyphen_http import HttpClient, HttpClientError, HttpResponse, create_headers
from hyphen_toggle import PUBLIC_KEY_PREFIX

from .client import LinkClient
from .exceptions import LinkError, LinkErrorCodes
from .models import (
    DEFAULT_LINK_URIS,
    CreateQRCodeOptions,
    CreateShortCodeOptions,
    GetCodeStatsResponse,
    GetQRCodesResponse,
    GetShortCodesResponse,
    LinkConfig,
    QRCodeResponse,
    ShortCodeResponse,
    UpdateShortCodeOptions,
)

logger = structlog.stdlib.get_logger(__name__)

ORGANIZATION_PLACEHOLDER = "{organizationId}"


def format_rfc3339(value: datetime) -> str:
    """datetime を RFC 3339 文字列に変換する。naive な値は UTC とみなす。"""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    text = value.isoformat(timespec="seconds")
    return text.removesuffix("+00:00") + "Z" if text.endswith("+00:00") else text


class HttpLinkClient(LinkClient):
    """Hyphen Link API を使った URL 短縮クライアント。"""

    def __init__(self, config: LinkConfig, http_client: HttpClient | None = None) -> None:
        if config.api_key.startswith(PUBLIC_KEY_PREFIX):
            raise LinkError(
                code=LinkErrorCodes.CONFIG_ERROR,
                message='API key cannot start with "public_"',
            )
        self._config = config
        self._uris = list(config.uris) or list(DEFAULT_LINK_URIS)
        self._headers = create_headers(config.api_key)
        self._http = http_client or HttpClient(timeout_seconds=config.timeout_seconds)
        self._error_handler: Callable[[Exception], None] | None = None

    @property
    def uris(self) -> list[str]:
        return list(self._uris)

    @property
    def organization_id(self) -> str:
        return self._config.organization_id

    def set_error_handler(self, handler: Callable[[Exception], None] | None) -> None:
        """エラーハンドラーを設定する。"""
        self._error_handler = handler

    def _emit_error(self, error: Exception) -> None:
        logger.warning("link request failed", error=str(error))
        handler = self._error_handler
        if handler is None:
            return
        try:
            handler(error)
        except Exception:
            logger.exception("link error handler raised", error=str(error))

    def _fail(self, code: str, message: str, cause: Exception | None = None) -> LinkError:
        error = LinkError(code=code, message=message, cause=cause)
        self._emit_error(error)
        return error

    def get_uri(self, *segments: str) -> str:
        """組織 ID を埋め込んだ API の URI を組み立てる。

        Raises:
            LinkError: 組織 ID が未設定の場合（VALIDATION_ERROR）
        """
        if not self._config.organization_id:
            raise self._fail(LinkErrorCodes.VALIDATION_ERROR, "organization ID is required")
        uri = self._uris[0].replace(ORGANIZATION_PLACEHOLDER, self._config.organization_id, 1)
        for segment in segments:
            if not segment:
                continue
            if uri.endswith("/"):
                uri = uri + segment + "/"
            else:
                uri = uri + "/" + segment
        return uri.removesuffix("/")

    async def _send(
        self,
        method: str,
        uri: str,
        expected_status: int,
        action: str,
        body: Any = None,
        params: Mapping[str, str] | None = None,
    ) -> HttpResponse:
        try:
            resp = await self._http.request(
                method, uri, body=body, headers=self._headers, params=params
            )
        except HttpClientError as e:
            raise self._fail(
                LinkErrorCodes.REQUEST_FAILED, f"failed to {action}: {e}", cause=e
            ) from e
        if resp.status_code != expected_status:
            raise self._fail(
                LinkErrorCodes.HTTP_ERROR,
                f"failed to {action}: HTTP {resp.status_code}: {resp.status}",
            )
        return resp

    def _decode(self, resp: HttpResponse, parse: Callable[[Any], Any]) -> Any:
        try:
            return parse(resp.json())
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise self._fail(
                LinkErrorCodes.DECODE_ERROR, f"failed to unmarshal response: {e}", cause=e
            ) from e

    async def create_short_code(
        self,
        long_url: str,
        domain: str,
        options: CreateShortCodeOptions | None = None,
    ) -> ShortCodeResponse:
        uri = self.get_uri()
        body: dict[str, Any] = {"long_url": long_url, "domain": domain}
        if options is not None:
            if options.code:
                body["code"] = options.code
            if options.title:
                body["title"] = options.title
            if options.tags:
                body["tags"] = list(options.tags)
        resp = await self._send("POST", uri, 201, "create short code", body=body)
        return self._decode(resp, ShortCodeResponse.from_dict)

    async def get_short_code(self, code: str) -> ShortCodeResponse:
        resp = await self._send("GET", self.get_uri(code), 200, "get short code")
        return self._decode(resp, ShortCodeResponse.from_dict)

    async def get_short_codes(
        self,
        title_search: str = "",
        tags: list[str] | None = None,
        page_number: int = 0,
        page_size: int = 0,
    ) -> GetShortCodesResponse:
        uri = self.get_uri()
        params: dict[str, str] = {}
        if title_search:
            params["title"] = title_search
        if tags:
            params["tags"] = ",".join(tags)
        if page_number > 0:
            params["pageNum"] = str(page_number)
        if page_size > 0:
            params["pageSize"] = str(page_size)
        resp = await self._send("GET", uri, 200, "get short codes", params=params or None)
        return self._decode(resp, GetShortCodesResponse.from_dict)

    async def get_tags(self) -> list[str]:
        resp = await self._send("GET", self.get_uri("tags"), 200, "get tags")
        return self._decode(resp, lambda data: [str(tag) for tag in data])

    async def get_code_stats(
        self, code: str, start_date: datetime, end_date: datetime
    ) -> GetCodeStatsResponse:
        uri = self.get_uri(code, "stats")
        params = {
            "startDate": format_rfc3339(start_date),
            "endDate": format_rfc3339(end_date),
        }
        resp = await self._send("GET", uri, 200, "get code stats", params=params)
        return self._decode(resp, GetCodeStatsResponse.from_dict)

    async def update_short_code(
        self, code: str, options: UpdateShortCodeOptions
    ) -> ShortCodeResponse:
        uri = self.get_uri(code)
        resp = await self._send(
            "PATCH", uri, 200, "update short code", body=options.to_dict()
        )
        return self._decode(resp, ShortCodeResponse.from_dict)

    async def delete_short_code(self, code: str) -> None:
        await self._send("DELETE", self.get_uri(code), 204, "delete short code")

    async def create_qr_code(
        self, code: str, options: CreateQRCodeOptions | None = None
    ) -> QRCodeResponse:
        uri = self.get_uri(code, "qrs")
        body = options.to_dict() if options is not None else {}
        resp = await self._send("POST", uri, 201, "create QR code", body=body)
        return self._decode(resp, QRCodeResponse.from_dict)

    async def get_qr_code(self, code: str, qr_id: str) -> QRCodeResponse:
        resp = await self._send("GET", self.get_uri(code, "qrs", qr_id), 200, "get QR code")
        return self._decode(resp, QRCodeResponse.from_dict)

    async def get_qr_codes(
        self, code: str, page_number: int = 0, page_size: int = 0
    ) -> GetQRCodesResponse:
        uri = self.get_uri(code, "qrs")
        params: dict[str, str] = {}
        if page_number > 0:
            params["pageNum"] = str(page_number)
        if page_size > 0:
            params["pageSize"] = str(page_size)
        resp = await self._send("GET", uri, 200, "get QR codes", params=params or None)
        return self._decode(resp, GetQRCodesResponse.from_dict)

    async def delete_qr_code(self, code: str, qr_id: str) -> None:
        await self._send("DELETE", self.get_uri(code, "qrs", qr_id), 204, "delete QR code")
