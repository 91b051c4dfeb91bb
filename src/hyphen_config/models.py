"""Hyphen SDK 設定型定義（pydantic BaseModel）"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

from hyphen_link import DEFAULT_LINK_URIS, LinkConfig
from hyphen_netinfo import DEFAULT_BASE_URI, NetInfoConfig
from hyphen_toggle import DEFAULT_ENVIRONMENT, ToggleConfig, ToggleContext, ToggleUser


class UserSection(BaseModel):
    """デフォルトコンテキストのユーザー設定。"""

    id: str
    email: str = ""
    name: str = ""
    custom_attributes: dict[str, Any] = Field(default_factory=dict)


class ContextSection(BaseModel):
    """デフォルト評価コンテキスト設定。"""

    targeting_key: str = ""
    ip_address: str = ""
    custom_attributes: dict[str, Any] = Field(default_factory=dict)
    user: UserSection | None = None

    def to_context(self) -> ToggleContext:
        user = None
        if self.user is not None:
            user = ToggleUser(
                id=self.user.id,
                email=self.user.email,
                name=self.user.name,
                custom_attributes=dict(self.user.custom_attributes),
            )
        return ToggleContext(
            targeting_key=self.targeting_key,
            ip_address=self.ip_address,
            custom_attributes=dict(self.custom_attributes),
            user=user,
        )


class ToggleSection(BaseModel):
    """Toggle サービス設定。"""

    horizon_urls: list[str] = Field(default_factory=list)
    default_context: ContextSection | None = None
    default_targeting_key: str = ""


class NetInfoSection(BaseModel):
    """NetInfo サービス設定。"""

    base_uri: str = DEFAULT_BASE_URI


class LinkSection(BaseModel):
    """Link サービス設定。"""

    uris: list[str] = Field(default_factory=lambda: list(DEFAULT_LINK_URIS))


class LogSection(BaseModel):
    """ログ設定。"""

    level: str = "INFO"
    format: Literal["json", "text"] = "json"


class HyphenSettings(BaseModel):
    """Hyphen SDK 設定全体。"""

    api_key: str = ""
    public_api_key: str = ""
    application_id: str = ""
    environment: str = DEFAULT_ENVIRONMENT
    organization_id: str = ""
    timeout_seconds: float = Field(default=30.0, gt=0)
    toggle: ToggleSection = Field(default_factory=ToggleSection)
    netinfo: NetInfoSection = Field(default_factory=NetInfoSection)
    link: LinkSection = Field(default_factory=LinkSection)
    log: LogSection = Field(default_factory=LogSection)

    def to_toggle_config(self) -> ToggleConfig:
        default_context = None
        if self.toggle.default_context is not None:
            default_context = self.toggle.default_context.to_context()
        return ToggleConfig(
            public_api_key=self.public_api_key,
            application_id=self.application_id,
            environment=self.environment,
            horizon_urls=tuple(self.toggle.horizon_urls),
            default_context=default_context,
            default_targeting_key=self.toggle.default_targeting_key,
            timeout_seconds=self.timeout_seconds,
        )

    def to_netinfo_config(self) -> NetInfoConfig:
        return NetInfoConfig(
            api_key=self.api_key,
            base_uri=self.netinfo.base_uri,
            timeout_seconds=self.timeout_seconds,
        )

    def to_link_config(self) -> LinkConfig:
        return LinkConfig(
            api_key=self.api_key,
            organization_id=self.organization_id,
            uris=list(self.link.uris),
            timeout_seconds=self.timeout_seconds,
        )
