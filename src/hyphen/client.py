"""Hyphen 全サービスをまとめたクライアント"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from hyphen_config import HyphenSettings
from hyphen_http import HttpClient
from hyphen_link import HttpLinkClient, LinkClient, LinkError
from hyphen_netinfo import HttpNetInfoClient, NetInfoClient, NetInfoError
from hyphen_telemetry import new_logger
from hyphen_toggle import HttpToggleClient, ToggleClient

logger = structlog.stdlib.get_logger(__name__)


@dataclass
class Hyphen:
    """Toggle / NetInfo / Link クライアントの集約。

    設定されていないサービスは None になる。
    """

    toggle: ToggleClient | None = None
    netinfo: NetInfoClient | None = None
    link: LinkClient | None = None

    @classmethod
    def from_settings(
        cls,
        settings: HyphenSettings,
        http_client: HttpClient | None = None,
        configure_logging: bool = False,
    ) -> Hyphen:
        """設定から各サービスのクライアントを生成する。

        公開 API キーがあれば Toggle を、API キーがあれば NetInfo と Link を生成する。
        NetInfo / Link の生成に失敗した場合はそのサービスを None にする。
        configure_logging が True なら settings.log でロガーを設定する。
        """
        if configure_logging:
            new_logger(level=settings.log.level, format=settings.log.format)
        http = http_client or HttpClient(timeout_seconds=settings.timeout_seconds)
        hyphen = cls()

        if settings.public_api_key:
            hyphen.toggle = HttpToggleClient(settings.to_toggle_config(), http)

        if settings.api_key:
            try:
                hyphen.netinfo = HttpNetInfoClient(settings.to_netinfo_config(), http)
            except NetInfoError as e:
                logger.warning("netinfo client disabled", error=str(e))
            try:
                hyphen.link = HttpLinkClient(settings.to_link_config(), http)
            except LinkError as e:
                logger.warning("link client disabled", error=str(e))

        return hyphen
