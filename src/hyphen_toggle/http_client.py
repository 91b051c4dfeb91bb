"""Horizon API を使った toggle HTTP クライアント実装"""

from __future__ import annotations

from typing import Any

import structlog

from hyphen_http import HttpClient, HttpClientError, create_headers

from .client import ToggleClient
from .config import ResolvedToggleConfig, ToggleConfig
from .context import build_evaluation_request
from .exceptions import AllEndpointsFailedError, ToggleError, ToggleErrorCodes
from .models import EvaluationResponse, ToggleContext

logger = structlog.stdlib.get_logger(__name__)

EVALUATE_PATH = "/toggle/evaluate"


class HttpToggleClient(ToggleClient):
    """Horizon エンドポイントを順に試行してトグルを評価するクライアント。"""

    def __init__(self, config: ToggleConfig, http_client: HttpClient | None = None) -> None:
        self._config = ResolvedToggleConfig.from_config(config)
        self._http = http_client or HttpClient(timeout_seconds=config.timeout_seconds)
        self._error_handler = None

    @property
    def config(self) -> ResolvedToggleConfig:
        return self._config

    @property
    def organization_id(self) -> str | None:
        return self._config.organization_id

    @property
    def horizon_urls(self) -> tuple[str, ...]:
        return self._config.horizon_urls

    @property
    def default_targeting_key(self) -> str:
        return self._config.default_targeting_key

    async def get(
        self,
        toggle_key: str,
        default_value: Any,
        context: ToggleContext | None = None,
    ) -> Any:
        body = build_evaluation_request(self._config, context).to_dict()
        headers = create_headers(self._config.public_api_key)

        last_error: ToggleError | None = None
        for base_url in self._config.horizon_urls:
            url = base_url.removesuffix("/") + EVALUATE_PATH
            try:
                resp = await self._http.post(url, body, headers)
            except HttpClientError as e:
                last_error = ToggleError(
                    code=ToggleErrorCodes.TRANSPORT_ERROR,
                    message=f"request to {base_url} failed: {e}",
                    cause=e,
                )
                logger.warning("horizon request failed", url=base_url, error=str(e))
                continue

            if resp.status_code != 200:
                last_error = ToggleError(
                    code=ToggleErrorCodes.UNEXPECTED_STATUS,
                    message=f"HTTP {resp.status_code}: {resp.status}",
                )
                logger.warning(
                    "horizon returned unexpected status",
                    url=base_url,
                    status_code=resp.status_code,
                )
                continue

            try:
                evaluation = EvaluationResponse.from_dict(resp.json())
            except ValueError as e:
                last_error = ToggleError(
                    code=ToggleErrorCodes.MALFORMED_RESPONSE,
                    message=f"failed to unmarshal response: {e}",
                    cause=e,
                )
                logger.warning("horizon returned malformed response", url=base_url, error=str(e))
                continue

            toggle = evaluation.toggles.get(toggle_key)
            if toggle is None:
                return default_value
            return toggle.value

        error = AllEndpointsFailedError(last_error, default_value)
        logger.error("all horizon URLs failed", toggle_key=toggle_key, error=str(last_error))
        self._emit_error(error)
        raise error
