"""ターゲティングキーの解決"""

from __future__ import annotations

import random

from .models import ToggleContext


def generate_targeting_key(application_id: str, environment: str) -> str:
    """匿名セッション用のターゲティングキーを生成する。

    衝突回避のみが目的のため、暗号論的な乱数は使わない。
    """
    components = [c for c in (application_id, environment) if c]
    components.append(str(random.getrandbits(63)))
    return "-".join(components)


def resolve_targeting_key(
    context: ToggleContext | None, application_id: str, environment: str
) -> str:
    """targeting_key > user.id > 生成キー の順でターゲティングキーを返す。"""
    if context is not None:
        if context.targeting_key:
            return context.targeting_key
        if context.user is not None and context.user.id:
            return context.user.id
    return generate_targeting_key(application_id, environment)
