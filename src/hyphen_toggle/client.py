"""ToggleClient 抽象基底クラス"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

import structlog

from .exceptions import ToggleError
from .models import ToggleContext, to_boolean, to_number, to_object, to_string

logger = structlog.stdlib.get_logger(__name__)

ErrorHandler = Callable[[Exception], None]


class ToggleClient(ABC):
    """フィーチャートグルクライアント抽象基底クラス。

    型付きアクセサ（get_boolean など）は例外を送出せず、
    評価に失敗した場合や型が一致しない場合は常にデフォルト値を返す。
    """

    _error_handler: ErrorHandler | None = None

    def set_error_handler(self, handler: ErrorHandler | None) -> None:
        """エラーハンドラーを設定する。

        属性の再束縛のみで、ロックは取らない。評価中の呼び出しは
        失敗を報告する時点で束縛されているハンドラーを使う。
        """
        self._error_handler = handler

    def _emit_error(self, error: Exception) -> None:
        handler = self._error_handler
        if handler is None:
            return
        try:
            handler(error)
        except Exception:
            logger.exception("toggle error handler raised", error=str(error))

    @abstractmethod
    async def get(
        self,
        toggle_key: str,
        default_value: Any,
        context: ToggleContext | None = None,
    ) -> Any:
        """トグル値を取得する。

        トグルが存在しない場合は default_value を返す。

        Raises:
            ToggleError: 評価自体に失敗した場合
        """
        ...

    async def _get_or_default(
        self, toggle_key: str, default_value: Any, context: ToggleContext | None
    ) -> Any:
        try:
            return await self.get(toggle_key, default_value, context)
        except ToggleError:
            return default_value

    async def get_boolean(
        self, toggle_key: str, default_value: bool, context: ToggleContext | None = None
    ) -> bool:
        value = to_boolean(await self._get_or_default(toggle_key, default_value, context))
        return default_value if value is None else value

    async def get_string(
        self, toggle_key: str, default_value: str, context: ToggleContext | None = None
    ) -> str:
        value = to_string(await self._get_or_default(toggle_key, default_value, context))
        return default_value if value is None else value

    async def get_number(
        self, toggle_key: str, default_value: float, context: ToggleContext | None = None
    ) -> float:
        value = to_number(await self._get_or_default(toggle_key, default_value, context))
        return default_value if value is None else value

    async def get_object(
        self,
        toggle_key: str,
        default_value: dict[str, Any],
        context: ToggleContext | None = None,
    ) -> dict[str, Any]:
        value = to_object(await self._get_or_default(toggle_key, default_value, context))
        return default_value if value is None else value
