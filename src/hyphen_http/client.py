"""httpx ベースの HTTP トランスポート"""

from __future__ import annotations

import json
from collections.abc import AsyncIterator, Mapping
from contextlib import asynccontextmanager
from typing import Any

import httpx

from .exceptions import HttpClientError, HttpClientErrorCodes
from .models import HttpResponse

DEFAULT_TIMEOUT_SECONDS = 30.0


def create_headers(api_key: str = "") -> dict[str, str]:
    """JSON 用の標準ヘッダーを作成する。api_key があれば x-api-key を付与する。"""
    headers: dict[str, str] = {
        "Content-Type": "application/json",
        "Accept": "application/json",
    }
    if api_key:
        headers["x-api-key"] = api_key
    return headers


class HttpClient:
    """Hyphen の各クライアントが共有する HTTP トランスポート。

    ステータスコードの解釈は行わず、レスポンスをそのまま返す。
    ``client`` を渡した場合はそれを使い回し、クローズは呼び出し側の責任とする。
    渡さない場合はリクエストごとに ``httpx.AsyncClient`` を生成する。
    """

    def __init__(
        self,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._timeout_seconds = timeout_seconds
        self._client = client

    @property
    def timeout_seconds(self) -> float:
        return self._timeout_seconds

    def _make_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self._timeout_seconds)

    @asynccontextmanager
    async def _session(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._client is not None:
            yield self._client
            return
        async with self._make_client() as client:
            yield client

    async def request(
        self,
        method: str,
        url: str,
        body: Any = None,
        headers: Mapping[str, str] | None = None,
        params: Mapping[str, str] | None = None,
    ) -> HttpResponse:
        """HTTP リクエストを実行する。

        Args:
            method: HTTP メソッド
            url: 絶対 URL
            body: JSON にエンコードするボディ（None なら送信しない）
            headers: 追加ヘッダー（標準の JSON ヘッダーを上書きする）
            params: クエリパラメータ

        Raises:
            HttpClientError: ボディのエンコード失敗またはネットワークエラー
        """
        content: bytes | None = None
        if body is not None:
            try:
                content = json.dumps(body).encode("utf-8")
            except (TypeError, ValueError) as e:
                raise HttpClientError(
                    code=HttpClientErrorCodes.ENCODE_ERROR,
                    message=f"failed to marshal request body: {e}",
                    cause=e,
                ) from e

        merged = create_headers()
        if headers:
            merged.update(headers)

        try:
            async with self._session() as client:
                resp = await client.request(
                    method,
                    url,
                    content=content,
                    headers=merged,
                    params=params,
                    timeout=self._timeout_seconds,
                )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise HttpClientError(
                code=HttpClientErrorCodes.REQUEST_FAILED,
                message=f"request failed: {e}",
                cause=e,
            ) from e

        return HttpResponse(
            status_code=resp.status_code,
            status=f"{resp.status_code} {resp.reason_phrase}".rstrip(),
            headers=dict(resp.headers),
            body=resp.content,
        )

    async def get(
        self,
        url: str,
        headers: Mapping[str, str] | None = None,
        params: Mapping[str, str] | None = None,
    ) -> HttpResponse:
        return await self.request("GET", url, headers=headers, params=params)

    async def post(
        self, url: str, body: Any = None, headers: Mapping[str, str] | None = None
    ) -> HttpResponse:
        return await self.request("POST", url, body=body, headers=headers)

    async def put(
        self, url: str, body: Any = None, headers: Mapping[str, str] | None = None
    ) -> HttpResponse:
        return await self.request("PUT", url, body=body, headers=headers)

    async def patch(
        self, url: str, body: Any = None, headers: Mapping[str, str] | None = None
    ) -> HttpResponse:
        return await self.request("PATCH", url, body=body, headers=headers)

    async def delete(
        self, url: str, headers: Mapping[str, str] | None = None
    ) -> HttpResponse:
        return await self.request("DELETE", url, headers=headers)
