"""toggle 設定解決のユニットテスト"""

import base64

import pytest
from hyphen_toggle import ResolvedToggleConfig, ToggleConfig, ToggleContext, ToggleUser

PUBLIC_KEY = "public_" + base64.b64encode(b"acme:secret").decode()


def test_environment_defaults_to_development() -> None:
    """環境名が空なら development になること。"""
    assert ResolvedToggleConfig.from_config(ToggleConfig()).environment == "development"
    assert ResolvedToggleConfig.from_config(ToggleConfig(environment="")).environment == "development"


def test_organization_id_and_urls_are_derived() -> None:
    """公開キーから組織 ID と URL 一覧が導出されること。"""
    config = ResolvedToggleConfig.from_config(ToggleConfig(public_api_key=PUBLIC_KEY))
    assert config.organization_id == "acme"
    assert config.horizon_urls == (
        "https://acme.toggle.hyphen.cloud",
        "https://toggle.hyphen.cloud",
    )


def test_non_public_key_has_no_organization() -> None:
    """公開キーでなければ組織 ID は None。"""
    config = ResolvedToggleConfig.from_config(ToggleConfig(public_api_key="secret-key"))
    assert config.organization_id is None
    assert config.horizon_urls == ("https://toggle.hyphen.cloud",)


def test_explicit_horizon_urls_win() -> None:
    """明示した URL 一覧が使われること。"""
    config = ResolvedToggleConfig.from_config(
        ToggleConfig(public_api_key=PUBLIC_KEY, horizon_urls=("https://dev-horizon.example",))
    )
    assert config.horizon_urls == ("https://dev-horizon.example",)
    assert config.organization_id == "acme"


def test_default_targeting_key_from_default_context() -> None:
    """デフォルトコンテキストからデフォルトキーを解決すること。"""
    ctx = ToggleContext(user=ToggleUser(id="user-7"))
    config = ResolvedToggleConfig.from_config(ToggleConfig(default_context=ctx))
    assert config.default_targeting_key == "user-7"


def test_default_targeting_key_generated() -> None:
    """コンテキストがなければキーを生成すること。"""
    config = ResolvedToggleConfig.from_config(ToggleConfig(application_id="app"))
    assert config.default_targeting_key.startswith("app-development-")


def test_config_is_immutable() -> None:
    """設定は生成後に変更できないこと。"""
    config = ToggleConfig()
    with pytest.raises(AttributeError):
        config.environment = "production"  # type: ignore[misc]
