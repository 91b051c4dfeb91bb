"""HttpClient のユニットテスト（respx モック）"""

import json

import httpx
import pytest
import respx
from hyphen_http import HttpClient, HttpClientError, HttpClientErrorCodes, create_headers

URL = "http://api.example.test/resource"


def test_create_headers_without_api_key() -> None:
    """api_key なしでは x-api-key を付与しないこと。"""
    headers = create_headers()
    assert headers == {"Content-Type": "application/json", "Accept": "application/json"}


def test_create_headers_with_api_key() -> None:
    """api_key ありでは x-api-key が付与されること。"""
    headers = create_headers("secret")
    assert headers["x-api-key"] == "secret"


@respx.mock
async def test_post_encodes_json_body() -> None:
    """ボディが JSON にエンコードされ、ヘッダーが送信されること。"""
    route = respx.post(URL).mock(return_value=httpx.Response(200, json={"ok": True}))
    client = HttpClient()
    resp = await client.post(URL, {"a": 1}, {"x-api-key": "k"})
    assert resp.status_code == 200
    assert resp.ok is True
    assert resp.json() == {"ok": True}
    request = route.calls.last.request
    assert json.loads(request.content) == {"a": 1}
    assert request.headers["x-api-key"] == "k"
    assert request.headers["accept"] == "application/json"


@respx.mock
async def test_status_is_passed_through() -> None:
    """エラーステータスでも例外にならず、そのまま返ること。"""
    respx.get(URL).mock(return_value=httpx.Response(500, text="boom"))
    resp = await HttpClient().get(URL)
    assert resp.status_code == 500
    assert resp.status == "500 Internal Server Error"
    assert resp.ok is False
    assert resp.body == b"boom"


@respx.mock
async def test_get_sends_query_params() -> None:
    """クエリパラメータが送信されること。"""
    route = respx.get(URL).mock(return_value=httpx.Response(200, json=[]))
    await HttpClient().get(URL, params={"pageNum": "2"})
    assert route.calls.last.request.url.params["pageNum"] == "2"


@respx.mock
async def test_network_error_raises_request_failed() -> None:
    """ネットワークエラーで HttpClientError(REQUEST_FAILED) が発生すること。"""
    respx.get(URL).mock(side_effect=httpx.ConnectError)
    with pytest.raises(HttpClientError) as exc_info:
        await HttpClient().get(URL)
    assert exc_info.value.code == HttpClientErrorCodes.REQUEST_FAILED
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


async def test_invalid_url_raises_request_failed() -> None:
    """組み立てられない URL で HttpClientError(REQUEST_FAILED) が発生すること。"""
    with pytest.raises(HttpClientError) as exc_info:
        await HttpClient().post("https://xn--ü.example/toggle/evaluate", {})
    assert exc_info.value.code == HttpClientErrorCodes.REQUEST_FAILED
    assert isinstance(exc_info.value.__cause__, httpx.InvalidURL)


async def test_unserializable_body_raises_encode_error() -> None:
    """JSON 化できないボディで HttpClientError(ENCODE_ERROR) が発生すること。"""
    with pytest.raises(HttpClientError) as exc_info:
        await HttpClient().post(URL, {"value": object()})
    assert exc_info.value.code == HttpClientErrorCodes.ENCODE_ERROR


@respx.mock
async def test_shared_async_client_is_reused() -> None:
    """渡した httpx.AsyncClient が使われ、クローズされないこと。"""
    respx.delete(URL).mock(return_value=httpx.Response(204))
    async with httpx.AsyncClient() as shared:
        client = HttpClient(client=shared)
        resp = await client.delete(URL)
        assert resp.status_code == 204
        assert shared.is_closed is False


def test_http_client_error_str() -> None:
    """__str__ がコード付きであること。"""
    err = HttpClientError(code="REQUEST_FAILED", message="oops")
    assert str(err) == "REQUEST_FAILED: oops"
