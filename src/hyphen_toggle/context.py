"""評価リクエストの組み立て"""

from __future__ import annotations

from .config import ResolvedToggleConfig
from .models import ToggleContext, ToggleEvaluationRequest
from .targeting import resolve_targeting_key


def build_evaluation_request(
    config: ResolvedToggleConfig, context_override: ToggleContext | None = None
) -> ToggleEvaluationRequest:
    """呼び出し時のコンテキストと設定から評価リクエストを作成する。

    context_override が None の場合は設定のデフォルトコンテキストを使う。
    ターゲティングキーが空のまま送信されることはない。
    """
    request = ToggleEvaluationRequest(
        application=config.application_id,
        environment=config.environment,
    )

    context = context_override if context_override is not None else config.default_context
    if context is not None:
        request.targeting_key = context.targeting_key
        request.ip_address = context.ip_address
        request.custom_attributes = dict(context.custom_attributes)
        request.user = context.user

    if not request.targeting_key:
        if context is not None:
            request.targeting_key = resolve_targeting_key(
                context, config.application_id, config.environment
            )
        else:
            request.targeting_key = config.default_targeting_key

    return request
