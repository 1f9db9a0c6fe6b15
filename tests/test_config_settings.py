from txintent.config import Settings


def test_toolkit_api_key_from_env(monkeypatch):
    monkeypatch.setenv("TOOLKIT_API_KEY", "primary-key")
    monkeypatch.setenv("UNIFAI_API_KEY", "legacy-key")

    settings = Settings()

    assert settings.toolkit_api_key == "primary-key"
    assert settings.has_toolkit_key is True


def test_toolkit_api_key_legacy_alias(monkeypatch):
    """Older deployments export UNIFAI_API_KEY only."""

    monkeypatch.delenv("TOOLKIT_API_KEY", raising=False)
    monkeypatch.setenv("UNIFAI_API_KEY", "legacy-key")

    settings = Settings(_env_file=None)

    assert settings.toolkit_api_key == "legacy-key"


def test_chain_table_defaults():
    settings = Settings(_env_file=None)

    assert settings.chain_ids == {"ethereum": 1, "base": 8453, "bsc": 56, "arbitrum": 42161}
    assert settings.default_slippage == 0.05
    assert settings.log_json is True
