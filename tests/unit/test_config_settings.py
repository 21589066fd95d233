import dataclasses

import pytest

from fusionauth.config import settings
from fusionauth.config.settings import ClientConfig, ProxyConfig, _get_int, _load_secret_from_file


@pytest.fixture()
def secrets_dir(monkeypatch, tmp_path):
    """Redirect /run/secrets to an empty temp directory."""
    real_path = settings.Path

    def fake_path(target):
        if str(target) == "/run/secrets":
            return tmp_path
        return real_path(target)

    monkeypatch.setattr(settings, "Path", fake_path)
    return tmp_path


def test_load_secret_prefers_run_secrets(clean_env, secrets_dir):
    (secrets_dir / "fusionauth_api_key").write_text("file-key\n")
    clean_env.setenv("FUSIONAUTH_API_KEY", "env-key")

    assert _load_secret_from_file("fusionauth_api_key", "FUSIONAUTH_API_KEY") == "file-key"


def test_load_secret_falls_back_to_env(clean_env, secrets_dir):
    clean_env.setenv("FUSIONAUTH_API_KEY", "env-key")
    assert _load_secret_from_file("fusionauth_api_key", "FUSIONAUTH_API_KEY") == "env-key"


def test_load_secret_ignores_empty_file(clean_env, secrets_dir):
    (secrets_dir / "fusionauth_api_key").write_text("   ")
    assert _load_secret_from_file("fusionauth_api_key", "FUSIONAUTH_API_KEY") is None


def test_get_int(clean_env):
    assert _get_int("FUSIONAUTH_READ_TIMEOUT_MS", 2000) == 2000
    clean_env.setenv("FUSIONAUTH_READ_TIMEOUT_MS", " 5000 ")
    assert _get_int("FUSIONAUTH_READ_TIMEOUT_MS", 2000) == 5000


def test_get_int_rejects_garbage(clean_env):
    clean_env.setenv("FUSIONAUTH_READ_TIMEOUT_MS", "fast")
    with pytest.raises(ValueError, match="FUSIONAUTH_READ_TIMEOUT_MS"):
        _get_int("FUSIONAUTH_READ_TIMEOUT_MS", 2000)


def test_load_settings_minimal(clean_env, secrets_dir):
    clean_env.setenv("FUSIONAUTH_URL", "http://localhost:9011")
    clean_env.setenv("FUSIONAUTH_API_KEY", "env-key")

    cfg = settings.load_settings()

    assert cfg == ClientConfig(base_url="http://localhost:9011", api_key="env-key")
    assert cfg.connect_timeout == 2000
    assert cfg.read_timeout == 2000
    assert cfg.proxy is None


def test_load_settings_full(clean_env, secrets_dir):
    (secrets_dir / "fusionauth_proxy_password").write_text("proxy-secret")
    clean_env.setenv("FUSIONAUTH_URL", "https://auth.example.com")
    clean_env.setenv("FUSIONAUTH_API_KEY", "env-key")
    clean_env.setenv("FUSIONAUTH_TENANT_ID", "tenant-1")
    clean_env.setenv("FUSIONAUTH_CONNECT_TIMEOUT_MS", "1000")
    clean_env.setenv("FUSIONAUTH_READ_TIMEOUT_MS", "8000")
    clean_env.setenv("FUSIONAUTH_CLIENT_CERT", "/certs/client.pem")
    clean_env.setenv("FUSIONAUTH_CLIENT_KEY", "/certs/client.key")
    clean_env.setenv("FUSIONAUTH_PROXY_URL", "http://proxy:3128")
    clean_env.setenv("FUSIONAUTH_PROXY_USERNAME", "svc")

    cfg = settings.load_settings()

    assert cfg.tenant_id == "tenant-1"
    assert cfg.connect_timeout == 1000
    assert cfg.read_timeout == 8000
    assert cfg.certificate == "/certs/client.pem"
    assert cfg.certificate_key == "/certs/client.key"
    assert cfg.proxy == ProxyConfig(url="http://proxy:3128", username="svc", password="proxy-secret")
    assert cfg.proxy.auth == "svc:proxy-secret"


def test_load_settings_requires_url(clean_env, secrets_dir):
    clean_env.setenv("FUSIONAUTH_API_KEY", "env-key")
    with pytest.raises(RuntimeError, match="FUSIONAUTH_URL"):
        settings.load_settings()


def test_load_settings_requires_api_key(clean_env, secrets_dir):
    clean_env.setenv("FUSIONAUTH_URL", "http://localhost:9011")
    with pytest.raises(RuntimeError, match="FUSIONAUTH_API_KEY"):
        settings.load_settings()


def test_load_settings_does_not_log_secrets(clean_env, secrets_dir, caplog):
    clean_env.setenv("FUSIONAUTH_URL", "http://localhost:9011")
    clean_env.setenv("FUSIONAUTH_API_KEY", "very-secret-key")
    caplog.set_level("INFO", logger="fusionauth.config.settings")

    settings.load_settings()

    assert "very-secret-key" not in caplog.text
    assert "FUSIONAUTH_API_KEY" in caplog.text


def test_proxy_auth_requires_both_credentials():
    assert ProxyConfig(url="http://proxy:3128").auth is None
    assert ProxyConfig(url="http://proxy:3128", username="svc").auth is None


def test_client_config_is_frozen():
    cfg = ClientConfig(base_url="http://localhost:9011")
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.tenant_id = "other"
