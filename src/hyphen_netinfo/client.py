"""NetInfoClient 抽象基底クラス"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence

from .models import IPInfo, IPInfoError


class NetInfoClient(ABC):
    """netinfo クライアント抽象基底クラス。"""

    @abstractmethod
    def set_error_handler(self, handler: Callable[[Exception], None] | None) -> None:
        """エラーハンドラーを設定する。"""
        ...

    @abstractmethod
    async def get_ip_info(self, ip: str) -> IPInfo:
        """単一 IP アドレスの情報を取得する。"""
        ...

    @abstractmethod
    async def get_ip_infos(self, ips: Sequence[str]) -> list[IPInfo | IPInfoError]:
        """複数 IP アドレスの情報を一括取得する。"""
        ...
