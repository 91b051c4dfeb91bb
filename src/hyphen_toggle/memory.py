"""InMemoryToggleClient 実装"""

from __future__ import annotations

from typing import Any

from .client import ToggleClient
from .models import ToggleContext


class InMemoryToggleClient(ToggleClient):
    """テスト用インメモリトグルクライアント。

    呼び出し時のコンテキストは ``contexts`` に記録される。
    """

    def __init__(self) -> None:
        self._toggles: dict[str, Any] = {}
        self.contexts: list[ToggleContext | None] = []

    def set_toggle(self, toggle_key: str, value: Any) -> None:
        """トグル値を設定する。"""
        self._toggles[toggle_key] = value

    def remove_toggle(self, toggle_key: str) -> None:
        """トグルを削除する。"""
        self._toggles.pop(toggle_key, None)

    async def get(
        self,
        toggle_key: str,
        default_value: Any,
        context: ToggleContext | None = None,
    ) -> Any:
        self.contexts.append(context)
        return self._toggles.get(toggle_key, default_value)
