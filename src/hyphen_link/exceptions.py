"""link ライブラリの例外型定義"""

from __future__ import annotations


class LinkError(Exception):
    """link ライブラリのエラー基底クラス。"""

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


class LinkErrorCodes:
    """LinkError のエラーコード定数。"""

    CONFIG_ERROR: str = "CONFIG_ERROR"
    VALIDATION_ERROR: str = "VALIDATION_ERROR"
    REQUEST_FAILED: str = "REQUEST_FAILED"
    HTTP_ERROR: str = "HTTP_ERROR"
    DECODE_ERROR: str = "DECODE_ERROR"
