"""toggle クライアント設定"""

from __future__ import annotations

from dataclasses import dataclass

from .keys import get_horizon_urls, get_org_id_from_public_key
from .models import ToggleContext
from .targeting import generate_targeting_key, resolve_targeting_key

DEFAULT_ENVIRONMENT = "development"


@dataclass(frozen=True)
class ToggleConfig:
    """toggle クライアント設定。

    public_api_key: 公開 API キー（``public_`` で始まるキーから組織 ID を導出する）
    application_id: アプリケーション ID
    environment: 環境名。空の場合は "development"
    horizon_urls: Horizon URL の明示的な一覧。空の場合はキーから導出する
    default_context: コンテキスト未指定時に使う評価コンテキスト
    default_targeting_key: コンテキストがない場合のターゲティングキー
    timeout_seconds: 1 エンドポイントあたりのタイムアウト秒数
    """

    public_api_key: str = ""
    application_id: str = ""
    environment: str = DEFAULT_ENVIRONMENT
    horizon_urls: tuple[str, ...] = ()
    default_context: ToggleContext | None = None
    default_targeting_key: str = ""
    timeout_seconds: float = 30.0


@dataclass(frozen=True)
class ResolvedToggleConfig:
    """導出値を解決済みの設定。クライアント生成時に一度だけ作られる。"""

    public_api_key: str
    organization_id: str | None
    application_id: str
    environment: str
    horizon_urls: tuple[str, ...]
    default_context: ToggleContext | None
    default_targeting_key: str
    timeout_seconds: float = 30.0

    @classmethod
    def from_config(cls, config: ToggleConfig) -> ResolvedToggleConfig:
        environment = config.environment or DEFAULT_ENVIRONMENT
        default_targeting_key = config.default_targeting_key
        if not default_targeting_key:
            if config.default_context is not None:
                default_targeting_key = resolve_targeting_key(
                    config.default_context, config.application_id, environment
                )
            else:
                default_targeting_key = generate_targeting_key(config.application_id, environment)
        organization_id = (
            get_org_id_from_public_key(config.public_api_key) if config.public_api_key else None
        )
        return cls(
            public_api_key=config.public_api_key,
            organization_id=organization_id,
            application_id=config.application_id,
            environment=environment,
            horizon_urls=tuple(get_horizon_urls(config.public_api_key, config.horizon_urls)),
            default_context=config.default_context,
            default_targeting_key=default_targeting_key,
            timeout_seconds=config.timeout_seconds,
        )
