"""HttpLinkClient のユニットテスト（respx モック）"""

import json
from datetime import datetime, timezone

import httpx
import pytest
import respx
from hyphen_link import (
    CreateQRCodeOptions,
    CreateShortCodeOptions,
    HttpLinkClient,
    LinkClient,
    LinkConfig,
    LinkError,
    LinkErrorCodes,
    QRSize,
    UpdateShortCodeOptions,
    format_rfc3339,
)

BASE_URL = "https://api.hyphen.ai/api/organizations/org-1/link/codes"

SHORT_CODE = {
    "id": "code_1",
    "code": "abc123",
    "long_url": "https://hyphen.ai",
    "domain": "test.h4n.link",
    "createdAt": "2025-01-01T00:00:00Z",
    "title": "Hyphen",
    "tags": ["sdk"],
    "organizationId": {"id": "org-1", "name": "Org"},
}

QR_CODE = {"id": "qr_1", "title": "QR", "qrCode": "iVBORw0KGgo=", "qrLink": "https://qr.example/1"}


def make_client(organization_id: str = "org-1") -> HttpLinkClient:
    return HttpLinkClient(LinkConfig(api_key="test-key", organization_id=organization_id))


def test_rejects_public_api_key() -> None:
    """公開 API キーは CONFIG_ERROR。"""
    with pytest.raises(LinkError) as exc_info:
        HttpLinkClient(LinkConfig(api_key="public_abc"))
    assert exc_info.value.code == LinkErrorCodes.CONFIG_ERROR


def test_error_handler_is_part_of_client_interface() -> None:
    """set_error_handler が抽象基底クラスで宣言されていること。"""
    assert "set_error_handler" in LinkClient.__abstractmethods__
    errors: list[Exception] = []
    client = make_client(organization_id="")
    assert isinstance(client, LinkClient)
    client.set_error_handler(errors.append)
    with pytest.raises(LinkError):
        client.get_uri()
    assert len(errors) == 1


def test_default_uris() -> None:
    """URI 未指定時はデフォルト URI を使うこと。"""
    client = HttpLinkClient(LinkConfig())
    assert client.uris == ["https://api.hyphen.ai/api/organizations/{organizationId}/link/codes/"]


def test_get_uri_requires_organization_id() -> None:
    """組織 ID が空なら VALIDATION_ERROR。"""
    client = make_client(organization_id="")
    errors: list[Exception] = []
    client.set_error_handler(errors.append)
    with pytest.raises(LinkError) as exc_info:
        client.get_uri()
    assert exc_info.value.code == LinkErrorCodes.VALIDATION_ERROR
    assert len(errors) == 1


def test_get_uri_segments() -> None:
    """セグメントがスラッシュ区切りで連結され、末尾スラッシュが除かれること。"""
    client = make_client()
    assert client.get_uri() == BASE_URL
    assert client.get_uri("abc") == f"{BASE_URL}/abc"
    assert client.get_uri("abc", "stats") == f"{BASE_URL}/abc/stats"
    assert client.get_uri("abc", "qrs", "qr_1") == f"{BASE_URL}/abc/qrs/qr_1"
    assert client.get_uri("abc", "", "qr_1") == f"{BASE_URL}/abc/qr_1"


def test_get_uri_without_trailing_slash() -> None:
    """末尾スラッシュのない URI でも正しく連結されること。"""
    client = HttpLinkClient(
        LinkConfig(organization_id="o", uris=["https://link.example/{organizationId}"])
    )
    assert client.get_uri("abc", "qrs") == "https://link.example/o/abc/qrs"


def test_format_rfc3339() -> None:
    """RFC 3339 形式に変換されること。"""
    assert format_rfc3339(datetime(2025, 1, 2, 3, 4, 5, tzinfo=timezone.utc)) == "2025-01-02T03:04:05Z"
    assert format_rfc3339(datetime(2025, 1, 2, 3, 4, 5)) == "2025-01-02T03:04:05Z"


@respx.mock
async def test_create_short_code_success() -> None:
    """短縮コード作成成功。"""
    route = respx.post(BASE_URL).mock(return_value=httpx.Response(201, json=SHORT_CODE))
    result = await make_client().create_short_code("https://hyphen.ai", "test.h4n.link")
    assert result.code == "abc123"
    assert result.organization_id.id == "org-1"
    request = route.calls.last.request
    assert json.loads(request.content) == {"long_url": "https://hyphen.ai", "domain": "test.h4n.link"}
    assert request.headers["x-api-key"] == "test-key"


@respx.mock
async def test_create_short_code_with_options() -> None:
    """オプションがボディに含まれること。"""
    route = respx.post(BASE_URL).mock(return_value=httpx.Response(201, json=SHORT_CODE))
    options = CreateShortCodeOptions(code="custom", title="Title", tags=["a", "b"])
    await make_client().create_short_code("https://hyphen.ai", "test.h4n.link", options)
    body = json.loads(route.calls.last.request.content)
    assert body["code"] == "custom"
    assert body["title"] == "Title"
    assert body["tags"] == ["a", "b"]


@respx.mock
async def test_create_short_code_unexpected_status() -> None:
    """201 以外は HTTP_ERROR となり、ハンドラーに通知されること。"""
    respx.post(BASE_URL).mock(return_value=httpx.Response(200, json=SHORT_CODE))
    client = make_client()
    errors: list[Exception] = []
    client.set_error_handler(errors.append)
    with pytest.raises(LinkError) as exc_info:
        await client.create_short_code("https://hyphen.ai", "test.h4n.link")
    assert exc_info.value.code == LinkErrorCodes.HTTP_ERROR
    assert errors == [exc_info.value]


@respx.mock
async def test_get_short_code_success() -> None:
    """短縮コード取得成功。"""
    respx.get(f"{BASE_URL}/abc123").mock(return_value=httpx.Response(200, json=SHORT_CODE))
    result = await make_client().get_short_code("abc123")
    assert result.long_url == "https://hyphen.ai"


@respx.mock
async def test_get_short_code_not_found() -> None:
    """404 は HTTP_ERROR。"""
    respx.get(f"{BASE_URL}/missing").mock(return_value=httpx.Response(404))
    with pytest.raises(LinkError) as exc_info:
        await make_client().get_short_code("missing")
    assert exc_info.value.code == LinkErrorCodes.HTTP_ERROR


@respx.mock
async def test_get_short_codes_query_params() -> None:
    """一覧取得のクエリパラメータ。"""
    route = respx.get(BASE_URL).mock(
        return_value=httpx.Response(
            200, json={"total": 1, "pageNum": 2, "pageSize": 10, "data": [SHORT_CODE]}
        )
    )
    result = await make_client().get_short_codes("Hyp", ["a", "b"], 2, 10)
    assert result.total == 1
    assert result.data[0].code == "abc123"
    params = route.calls.last.request.url.params
    assert params["title"] == "Hyp"
    assert params["tags"] == "a,b"
    assert params["pageNum"] == "2"
    assert params["pageSize"] == "10"


@respx.mock
async def test_get_short_codes_without_params() -> None:
    """パラメータ未指定時はクエリを付けないこと。"""
    route = respx.get(BASE_URL).mock(
        return_value=httpx.Response(200, json={"total": 0, "pageNum": 1, "pageSize": 20, "data": []})
    )
    await make_client().get_short_codes()
    assert route.calls.last.request.url.query == b""


@respx.mock
async def test_get_tags_success() -> None:
    """タグ一覧取得。"""
    respx.get(f"{BASE_URL}/tags").mock(return_value=httpx.Response(200, json=["sdk", "docs"]))
    assert await make_client().get_tags() == ["sdk", "docs"]


@respx.mock
async def test_get_code_stats_success() -> None:
    """統計情報取得と日付パラメータ。"""
    route = respx.get(f"{BASE_URL}/abc123/stats").mock(
        return_value=httpx.Response(
            200,
            json={
                "clicks": {
                    "total": 10,
                    "unique": 4,
                    "byDay": [{"date": "2025-01-01", "total": 10, "unique": 4}],
                },
                "referrals": [],
                "browsers": [{"name": "firefox", "total": 3}],
                "devices": [],
                "locations": [],
            },
        )
    )
    start = datetime(2025, 1, 1, tzinfo=timezone.utc)
    end = datetime(2025, 1, 31, tzinfo=timezone.utc)
    stats = await make_client().get_code_stats("abc123", start, end)
    assert stats.clicks.total == 10
    assert stats.clicks.by_day[0].unique == 4
    assert stats.browsers == [{"name": "firefox", "total": 3}]
    params = route.calls.last.request.url.params
    assert params["startDate"] == "2025-01-01T00:00:00Z"
    assert params["endDate"] == "2025-01-31T00:00:00Z"


@respx.mock
async def test_update_short_code_success() -> None:
    """短縮コード更新は PATCH で空項目を送らないこと。"""
    route = respx.patch(f"{BASE_URL}/abc123").mock(return_value=httpx.Response(200, json=SHORT_CODE))
    await make_client().update_short_code("abc123", UpdateShortCodeOptions(title="New"))
    assert json.loads(route.calls.last.request.content) == {"title": "New"}


@respx.mock
async def test_delete_short_code_success() -> None:
    """短縮コード削除成功（例外なし）。"""
    respx.delete(f"{BASE_URL}/abc123").mock(return_value=httpx.Response(204))
    await make_client().delete_short_code("abc123")


@respx.mock
async def test_delete_short_code_unexpected_status() -> None:
    """204 以外は HTTP_ERROR。"""
    respx.delete(f"{BASE_URL}/abc123").mock(return_value=httpx.Response(200))
    with pytest.raises(LinkError) as exc_info:
        await make_client().delete_short_code("abc123")
    assert exc_info.value.code == LinkErrorCodes.HTTP_ERROR


@respx.mock
async def test_create_qr_code_success() -> None:
    """QR コード作成。"""
    route = respx.post(f"{BASE_URL}/abc123/qrs").mock(return_value=httpx.Response(201, json=QR_CODE))
    options = CreateQRCodeOptions(title="QR", color="#000000", size=QRSize.LARGE)
    result = await make_client().create_qr_code("abc123", options)
    assert result.qr_link == "https://qr.example/1"
    assert json.loads(route.calls.last.request.content) == {
        "title": "QR",
        "color": "#000000",
        "size": "large",
    }


@respx.mock
async def test_get_qr_code_success() -> None:
    """QR コード取得。"""
    respx.get(f"{BASE_URL}/abc123/qrs/qr_1").mock(return_value=httpx.Response(200, json=QR_CODE))
    result = await make_client().get_qr_code("abc123", "qr_1")
    assert result.id == "qr_1"
    assert result.qr_code == "iVBORw0KGgo="


@respx.mock
async def test_get_qr_codes_pagination() -> None:
    """QR コード一覧のページング。"""
    route = respx.get(f"{BASE_URL}/abc123/qrs").mock(
        return_value=httpx.Response(
            200, json={"total": 1, "pageNum": 1, "pageSize": 5, "data": [QR_CODE]}
        )
    )
    result = await make_client().get_qr_codes("abc123", 1, 5)
    assert result.data[0].id == "qr_1"
    params = route.calls.last.request.url.params
    assert params["pageNum"] == "1"
    assert params["pageSize"] == "5"


@respx.mock
async def test_delete_qr_code_success() -> None:
    """QR コード削除成功（例外なし）。"""
    respx.delete(f"{BASE_URL}/abc123/qrs/qr_1").mock(return_value=httpx.Response(204))
    await make_client().delete_qr_code("abc123", "qr_1")


@respx.mock
async def test_network_error_is_request_failed() -> None:
    """ネットワークエラーは REQUEST_FAILED。"""
    respx.get(f"{BASE_URL}/tags").mock(side_effect=httpx.ConnectTimeout)
    with pytest.raises(LinkError) as exc_info:
        await make_client().get_tags()
    assert exc_info.value.code == LinkErrorCodes.REQUEST_FAILED


@respx.mock
async def test_malformed_body_is_decode_error() -> None:
    """必須項目のないレスポンスは DECODE_ERROR。"""
    respx.get(f"{BASE_URL}/abc123").mock(return_value=httpx.Response(200, json={"title": "x"}))
    with pytest.raises(LinkError) as exc_info:
        await make_client().get_short_code("abc123")
    assert exc_info.value.code == LinkErrorCodes.DECODE_ERROR
