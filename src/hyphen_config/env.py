""".env ファイルの読み込み"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENVIRONMENT_VARIABLE = "PYTHON_ENV"


@dataclass
class EnvOptions:
    """.env 読み込みオプション。

    path: .env ファイルを探すディレクトリ（空ならカレントディレクトリ）
    environment: 環境名（空なら PYTHON_ENV 環境変数）
    local: .env.local 系ファイルも読み込むか
    """

    path: str = ""
    environment: str = ""
    local: bool = True


def load_env(options: EnvOptions | None = None) -> list[Path]:
    """.env -> .env.local -> .env.<env> -> .env.<env>.local の順で読み込む。

    .env は既存の環境変数を上書きしない。以降のファイルは上書きする。
    存在しないファイルは無視する。読み込んだファイルのパスを返す。
    """
    if options is None:
        options = EnvOptions()
    directory = Path(options.path) if options.path else Path.cwd()

    candidates: list[tuple[Path, bool]] = [(directory / ".env", False)]
    if options.local:
        candidates.append((directory / ".env.local", True))

    environment = options.environment or os.environ.get(ENVIRONMENT_VARIABLE, "")
    if environment:
        candidates.append((directory / f".env.{environment}", True))
        if options.local:
            candidates.append((directory / f".env.{environment}.local", True))

    loaded: list[Path] = []
    for path, override in candidates:
        if path.is_file():
            load_dotenv(path, override=override)
            loaded.append(path)
    return loaded
