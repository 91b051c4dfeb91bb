"""設定ファイルと環境変数の読み込み"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .exceptions import ConfigError, ConfigErrorCodes
from .merger import deep_merge
from .models import HyphenSettings

ENV_PREFIX = "HYPHEN_"
NESTED_DELIMITER = "__"

# 環境変数名 -> HyphenSettings のフィールド名
ENV_VARS: dict[str, str] = {
    "HYPHEN_API_KEY": "api_key",
    "HYPHEN_PUBLIC_API_KEY": "public_api_key",
    "HYPHEN_APPLICATION_ID": "application_id",
    "HYPHEN_ORGANIZATION_ID": "organization_id",
    "HYPHEN_ENVIRONMENT": "environment",
}


def _read_yaml(path: Path) -> dict[str, Any]:
    """YAML ファイルを読み込む。"""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(
            code=ConfigErrorCodes.READ_FILE,
            message=f"Failed to read config file: {path}",
            cause=e,
        ) from e
    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise ConfigError(
            code=ConfigErrorCodes.PARSE_YAML,
            message=f"Failed to parse YAML: {path}",
            cause=e,
        ) from e
    if not isinstance(data, dict):
        raise ConfigError(
            code=ConfigErrorCodes.PARSE_YAML,
            message=f"Config root must be a mapping: {path}",
        )
    return data


def _from_environ(environ: Mapping[str, str]) -> dict[str, Any]:
    """環境変数を設定辞書に変換する。

    ENV_VARS のトップレベル項目に加え、HYPHEN_LOG__LEVEL のように
    "__" で区切った変数をネストしたセクションの値として扱う。
    """
    data: dict[str, Any] = {
        field: environ[name] for name, field in ENV_VARS.items() if environ.get(name)
    }
    for name, value in environ.items():
        if not value or not name.startswith(ENV_PREFIX) or NESTED_DELIMITER not in name:
            continue
        path = name.removeprefix(ENV_PREFIX).lower().split(NESTED_DELIMITER)
        if not all(path):
            continue
        nested: Any = value
        for key in reversed(path):
            nested = {key: nested}
        data = deep_merge(data, nested)
    return data


def load(
    path: Path | None = None, environ: Mapping[str, str] | None = None
) -> HyphenSettings:
    """設定を読み込んで HyphenSettings を返す。

    path: YAML 設定ファイルパス（オプション）
    environ: 参照する環境変数（省略時は os.environ）。ファイルに値がない項目の補完に使う。
    """
    data = _from_environ(os.environ if environ is None else environ)
    if path is not None:
        data = deep_merge(data, _read_yaml(path))
    try:
        return HyphenSettings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(
            code=ConfigErrorCodes.VALIDATION,
            message=f"Config validation failed: {e}",
            cause=e,
        ) from e
