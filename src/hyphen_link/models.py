"""link データモデル"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

DEFAULT_LINK_URIS: tuple[str, ...] = (
    "https://api.hyphen.ai/api/organizations/{organizationId}/link/codes/",
)


class QRSize(StrEnum):
    """QR コードのサイズ。"""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


@dataclass
class OrganizationRef:
    """レスポンスに含まれる組織情報。"""

    id: str = ""
    name: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> OrganizationRef:
        return cls(id=data.get("id", ""), name=data.get("name", ""))


@dataclass
class CreateShortCodeOptions:
    """短縮コード作成時のオプション。"""

    code: str = ""
    title: str = ""
    tags: list[str] = field(default_factory=list)


@dataclass
class UpdateShortCodeOptions:
    """短縮コード更新時のオプション。空の項目は送信しない。"""

    long_url: str = ""
    title: str = ""
    tags: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.long_url:
            data["long_url"] = self.long_url
        if self.title:
            data["title"] = self.title
        if self.tags:
            data["tags"] = list(self.tags)
        return data


@dataclass
class ShortCodeResponse:
    """短縮コード。"""

    id: str
    code: str
    long_url: str
    domain: str
    created_at: str = ""
    title: str = ""
    tags: list[str] = field(default_factory=list)
    organization_id: OrganizationRef = field(default_factory=OrganizationRef)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ShortCodeResponse:
        """API レスポンス辞書から ShortCodeResponse を生成する。"""
        return cls(
            id=data["id"],
            code=data["code"],
            long_url=data.get("long_url", ""),
            domain=data.get("domain", ""),
            created_at=data.get("createdAt", ""),
            title=data.get("title", ""),
            tags=list(data.get("tags") or []),
            organization_id=OrganizationRef.from_dict(data.get("organizationId") or {}),
        )


@dataclass
class GetShortCodesResponse:
    """短縮コード一覧レスポンス。"""

    total: int
    page_num: int
    page_size: int
    data: list[ShortCodeResponse] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GetShortCodesResponse:
        return cls(
            total=data.get("total", 0),
            page_num=data.get("pageNum", 0),
            page_size=data.get("pageSize", 0),
            data=[ShortCodeResponse.from_dict(d) for d in data.get("data") or []],
        )


@dataclass
class CreateQRCodeOptions:
    """QR コード作成時のオプション。"""

    title: str = ""
    background_color: str = ""
    color: str = ""
    size: QRSize | None = None
    logo: str = ""

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.title:
            data["title"] = self.title
        if self.background_color:
            data["backgroundColor"] = self.background_color
        if self.color:
            data["color"] = self.color
        if self.size is not None:
            data["size"] = self.size.value
        if self.logo:
            data["logo"] = self.logo
        return data


@dataclass
class QRCodeResponse:
    """QR コード。qr_code は base64 エンコードされた画像。"""

    id: str
    qr_code: str = ""
    qr_link: str = ""
    title: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> QRCodeResponse:
        return cls(
            id=data["id"],
            qr_code=data.get("qrCode", ""),
            qr_link=data.get("qrLink", ""),
            title=data.get("title", ""),
        )


@dataclass
class GetQRCodesResponse:
    """QR コード一覧レスポンス。"""

    total: int
    page_num: int
    page_size: int
    data: list[QRCodeResponse] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GetQRCodesResponse:
        return cls(
            total=data.get("total", 0),
            page_num=data.get("pageNum", 0),
            page_size=data.get("pageSize", 0),
            data=[QRCodeResponse.from_dict(d) for d in data.get("data") or []],
        )


@dataclass
class ClicksByDay:
    date: str
    total: int = 0
    unique: int = 0


@dataclass
class ClicksStats:
    total: int = 0
    unique: int = 0
    by_day: list[ClicksByDay] = field(default_factory=list)


@dataclass
class GetCodeStatsResponse:
    """短縮コードの統計情報。"""

    clicks: ClicksStats = field(default_factory=ClicksStats)
    referrals: list[Any] = field(default_factory=list)
    browsers: list[Any] = field(default_factory=list)
    devices: list[Any] = field(default_factory=list)
    locations: list[Any] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GetCodeStatsResponse:
        clicks = data.get("clicks") or {}
        return cls(
            clicks=ClicksStats(
                total=clicks.get("total", 0),
                unique=clicks.get("unique", 0),
                by_day=[
                    ClicksByDay(
                        date=d["date"],
                        total=d.get("total", 0),
                        unique=d.get("unique", 0),
                    )
                    for d in clicks.get("byDay") or []
                ],
            ),
            referrals=list(data.get("referrals") or []),
            browsers=list(data.get("browsers") or []),
            devices=list(data.get("devices") or []),
            locations=list(data.get("locations") or []),
        )


@dataclass
class LinkConfig:
    """link クライアント設定。"""

    api_key: str = ""
    organization_id: str = ""
    uris: list[str] = field(default_factory=lambda: list(DEFAULT_LINK_URIS))
    timeout_seconds: float = 30.0
