"""公開 API キーの解析と Horizon エンドポイントの解決"""

from __future__ import annotations

import base64
import binascii
from collections.abc import Sequence

PUBLIC_KEY_PREFIX = "public_"
DEFAULT_HORIZON_URL = "https://toggle.hyphen.cloud"
ORGANIZATION_HORIZON_URL = "https://{organization_id}.toggle.hyphen.cloud"


def get_org_id_from_public_key(public_key: str) -> str | None:
    """公開 API キーから組織 ID を取り出す。

    キーは ``public_`` + base64("<組織ID>:<シークレット>") の形式。
    形式に合わない場合は例外を送出せず None を返す。
    """
    if not public_key.startswith(PUBLIC_KEY_PREFIX):
        return None
    encoded = public_key[len(PUBLIC_KEY_PREFIX) :]
    try:
        decoded = base64.b64decode(encoded, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError):
        return None
    org_id = decoded.split(":", 1)[0]
    return org_id or None


def get_horizon_urls(public_key: str, horizon_urls: Sequence[str] | None = None) -> list[str]:
    """評価リクエストを試行する Horizon URL の一覧を順序付きで返す。

    明示的な一覧があればそのまま使う。なければ組織用 URL、共通 URL の順。
    組織 ID を解決できない場合は共通 URL のみ。
    """
    if horizon_urls:
        return list(horizon_urls)
    org_id = get_org_id_from_public_key(public_key) if public_key else None
    if org_id is None:
        return [DEFAULT_HORIZON_URL]
    return [ORGANIZATION_HORIZON_URL.format(organization_id=org_id), DEFAULT_HORIZON_URL]
