"""LinkClient 抽象基底クラス"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from datetime import datetime

from .models import (
    CreateQRCodeOptions,
    CreateShortCodeOptions,
    GetCodeStatsResponse,
    GetQRCodesResponse,
    GetShortCodesResponse,
    QRCodeResponse,
    ShortCodeResponse,
    UpdateShortCodeOptions,
)


class LinkClient(ABC):
    """URL 短縮クライアント抽象基底クラス。"""

    @abstractmethod
    def set_error_handler(self, handler: Callable[[Exception], None] | None) -> None:
        """エラーハンドラーを設定する。"""
        ...

    @abstractmethod
    async def create_short_code(
        self,
        long_url: str,
        domain: str,
        options: CreateShortCodeOptions | None = None,
    ) -> ShortCodeResponse:
        """短縮コードを作成する。"""
        ...

    @abstractmethod
    async def get_short_code(self, code: str) -> ShortCodeResponse:
        """短縮コードを取得する。"""
        ...

    @abstractmethod
    async def get_short_codes(
        self,
        title_search: str = "",
        tags: list[str] | None = None,
        page_number: int = 0,
        page_size: int = 0,
    ) -> GetShortCodesResponse:
        """組織の短縮コード一覧を取得する。"""
        ...

    @abstractmethod
    async def get_tags(self) -> list[str]:
        """組織の短縮コードに付与されたタグ一覧を取得する。"""
        ...

    @abstractmethod
    async def get_code_stats(
        self, code: str, start_date: datetime, end_date: datetime
    ) -> GetCodeStatsResponse:
        """短縮コードの統計情報を取得する。"""
        ...

    @abstractmethod
    async def update_short_code(
        self, code: str, options: UpdateShortCodeOptions
    ) -> ShortCodeResponse:
        """短縮コードを更新する。"""
        ...

    @abstractmethod
    async def delete_short_code(self, code: str) -> None:
        """短縮コードを削除する。"""
        ...

    @abstractmethod
    async def create_qr_code(
        self, code: str, options: CreateQRCodeOptions | None = None
    ) -> QRCodeResponse:
        """短縮コードの QR コードを作成する。"""
        ...

    @abstractmethod
    async def get_qr_code(self, code: str, qr_id: str) -> QRCodeResponse:
        """QR コードを取得する。"""
        ...

    @abstractmethod
    async def get_qr_codes(
        self, code: str, page_number: int = 0, page_size: int = 0
    ) -> GetQRCodesResponse:
        """短縮コードの QR コード一覧を取得する。"""
        ...

    @abstractmethod
    async def delete_qr_code(self, code: str, qr_id: str) -> None:
        """QR コードを削除する。"""
        ...
