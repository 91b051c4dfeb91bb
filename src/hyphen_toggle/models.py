"""toggle データモデル"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ToggleUser:
    """評価対象のユーザー情報。"""

    id: str
    email: str = ""
    name: str = ""
    custom_attributes: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"id": self.id}
        if self.email:
            data["email"] = self.email
        if self.name:
            data["name"] = self.name
        if self.custom_attributes:
            data["customAttributes"] = dict(self.custom_attributes)
        return data


@dataclass(frozen=True)
class ToggleContext:
    """トグル評価コンテキスト。"""

    targeting_key: str = ""
    ip_address: str = ""
    custom_attributes: dict[str, Any] = field(default_factory=dict)
    user: ToggleUser | None = None


@dataclass
class ToggleEvaluationRequest:
    """/toggle/evaluate へ送信するリクエストボディ。"""

    application: str
    environment: str
    targeting_key: str = ""
    ip_address: str = ""
    custom_attributes: dict[str, Any] = field(default_factory=dict)
    user: ToggleUser | None = None

    def to_dict(self) -> dict[str, Any]:
        """空のオプション項目を省いた API 用の辞書に変換する。"""
        data: dict[str, Any] = {
            "application": self.application,
            "environment": self.environment,
        }
        if self.targeting_key:
            data["targetingKey"] = self.targeting_key
        if self.ip_address:
            data["ipAddress"] = self.ip_address
        if self.custom_attributes:
            data["customAttributes"] = dict(self.custom_attributes)
        if self.user is not None:
            data["user"] = self.user.to_dict()
        return data


@dataclass
class Evaluation:
    """単一トグルの評価結果。"""

    key: str
    value: Any
    type: str = ""
    reason: Any = None
    error_message: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> Evaluation:
        """API レスポンスの 1 エントリから Evaluation を生成する。

        Raises:
            ValueError: エントリの形が不正な場合
        """
        if not isinstance(data, dict):
            raise ValueError(f"toggle entry must be an object, got {type(data).__name__}")
        key = data.get("key", "")
        type_ = data.get("type", "")
        error_message = data.get("errorMessage", "")
        if not isinstance(key, str) or not isinstance(type_, str):
            raise ValueError("toggle entry fields 'key' and 'type' must be strings")
        if not isinstance(error_message, str):
            raise ValueError("toggle entry field 'errorMessage' must be a string")
        return cls(
            key=key,
            value=data.get("value"),
            type=type_,
            reason=data.get("reason"),
            error_message=error_message,
        )


@dataclass
class EvaluationResponse:
    """/toggle/evaluate のレスポンス。"""

    toggles: dict[str, Evaluation] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> EvaluationResponse:
        """Raises:
            ValueError: レスポンスの形が不正な場合
        """
        if not isinstance(data, dict):
            raise ValueError(f"evaluation response must be an object, got {type(data).__name__}")
        toggles = data.get("toggles")
        if toggles is None:
            toggles = {}
        if not isinstance(toggles, dict):
            raise ValueError("evaluation response field 'toggles' must be an object")
        return cls(toggles={k: Evaluation.from_dict(v) for k, v in toggles.items()})


# 型ごとの変換関数。型が一致しない場合は None を返し、呼び出し側がデフォルト値を使う。


def to_boolean(value: Any) -> bool | None:
    if isinstance(value, bool):
        return value
    return None


def to_string(value: Any) -> str | None:
    if isinstance(value, str):
        return value
    return None


def to_number(value: Any) -> float | None:
    # bool は int のサブクラスなので数値として扱わない
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            return float(value)
        except OverflowError:
            return None
    return None


def to_object(value: Any) -> dict[str, Any] | None:
    if isinstance(value, dict):
        return value
    return None
