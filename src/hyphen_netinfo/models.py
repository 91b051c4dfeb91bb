"""netinfo データモデル"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

DEFAULT_BASE_URI = "https://net.info"


@dataclass
class Location:
    """IP アドレスの地理情報。"""

    country: str = ""
    region: str = ""
    city: str = ""
    lat: float = 0.0
    lng: float = 0.0
    postal_code: str = ""
    timezone: str = ""
    geoname_id: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Location:
        return cls(
            country=data.get("country", ""),
            region=data.get("region", ""),
            city=data.get("city", ""),
            lat=float(data.get("lat", 0.0)),
            lng=float(data.get("lng", 0.0)),
            postal_code=data.get("postalCode", ""),
            timezone=data.get("timezone", ""),
            geoname_id=int(data.get("geonameId", 0)),
        )


@dataclass
class IPInfo:
    """IP アドレス情報。"""

    ip: str
    type: str = ""
    location: Location = field(default_factory=Location)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> IPInfo:
        """API レスポンス辞書から IPInfo を生成する。"""
        return cls(
            ip=data["ip"],
            type=data.get("type", ""),
            location=Location.from_dict(data.get("location") or {}),
        )


@dataclass
class IPInfoError:
    """一括取得時に個別 IP で発生したエラー。"""

    ip: str
    type: str = ""
    error_message: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> IPInfoError:
        return cls(
            ip=data.get("ip", ""),
            type=data.get("type", ""),
            error_message=data.get("errorMessage", ""),
        )


def ip_info_from_dict(data: dict[str, Any]) -> IPInfo | IPInfoError:
    """errorMessage を持つエントリは IPInfoError として扱う。"""
    if data.get("errorMessage"):
        return IPInfoError.from_dict(data)
    return IPInfo.from_dict(data)


@dataclass
class NetInfoConfig:
    """netinfo クライアント設定。"""

    api_key: str
    base_uri: str = DEFAULT_BASE_URI
    timeout_seconds: float = 30.0
