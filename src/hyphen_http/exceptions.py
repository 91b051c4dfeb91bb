"""http トランスポートの例外型定義"""

from __future__ import annotations


class HttpClientError(Exception):
    """http トランスポートのエラー基底クラス。"""

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


class HttpClientErrorCodes:
    """HttpClientError のエラーコード定数。"""

    ENCODE_ERROR: str = "ENCODE_ERROR"
    REQUEST_FAILED: str = "REQUEST_FAILED"
