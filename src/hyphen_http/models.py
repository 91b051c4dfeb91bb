"""http トランスポートのデータモデル"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any


@dataclass
class HttpResponse:
    """HTTP レスポンス。ボディは生バイト列のまま保持する。"""

    status_code: int
    status: str
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self) -> Any:
        """ボディを JSON としてデコードする。

        Raises:
            ValueError: ボディが JSON として不正な場合
        """
        return json.loads(self.body)
