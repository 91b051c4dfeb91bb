"""toggle ライブラリの例外型定義"""

from __future__ import annotations

from typing import Any


class ToggleError(Exception):
    """toggle ライブラリのエラー基底クラス。"""

    def __init__(
        self,
        code: str,
        message: str,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"{self.code}: {super().__str__()}"


class ToggleErrorCodes:
    """ToggleError のエラーコード定数。"""

    TRANSPORT_ERROR: str = "TRANSPORT_ERROR"
    UNEXPECTED_STATUS: str = "UNEXPECTED_STATUS"
    MALFORMED_RESPONSE: str = "MALFORMED_RESPONSE"
    ALL_ENDPOINTS_FAILED: str = "ALL_ENDPOINTS_FAILED"


class AllEndpointsFailedError(ToggleError):
    """全ての Horizon エンドポイントで評価に失敗した場合のエラー。

    呼び出し側のデフォルト値を ``default_value`` として保持する。
    """

    def __init__(self, last_error: Exception | None, default_value: Any = None) -> None:
        self.last_error = last_error
        self.default_value = default_value
        message = "all horizon URLs failed"
        if last_error is not None:
            message += f". Last error: {last_error}"
        super().__init__(
            code=ToggleErrorCodes.ALL_ENDPOINTS_FAILED,
            message=message,
            cause=last_error,
        )
