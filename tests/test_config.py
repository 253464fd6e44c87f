# tests/test_config.py
from pathlib import Path

import pytest

from app.config import ConfigurationError, load_settings

def test_defaults(monkeypatch):
    for key in ("STORE_HOST", "STORE_PORT", "STORE_IMAGES_DIR", "STORE_ID_POLICY",
                "STORE_CORS_ORIGINS", "STORE_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    s = load_settings()
    assert s.port == 3000
    assert s.id_policy == "max"
    assert s.cors_origins == ["*"]
    assert s.images_dir.parts[-2:] == ("public", "images")
    assert s.base_url == "http://localhost:3000"

def test_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("STORE_PORT", "8085")
    monkeypatch.setenv("STORE_ID_POLICY", "LAST")
    monkeypatch.setenv("STORE_CORS_ORIGINS", "http://localhost:5173, http://example.com")
    monkeypatch.setenv("STORE_IMAGES_DIR", str(tmp_path))
    monkeypatch.setenv("STORE_LOG_LEVEL", "debug")
    s = load_settings()
    assert s.port == 8085
    assert s.id_policy == "last"
    assert s.cors_origins == ["http://localhost:5173", "http://example.com"]
    assert s.images_dir == Path(tmp_path)
    assert s.log_level == "DEBUG"

@pytest.mark.parametrize("key,value", [("STORE_ID_POLICY", "counter"), ("STORE_PORT", "eighty")])
def test_bad_values_fail_fast(monkeypatch, key, value):
    monkeypatch.setenv(key, value)
    with pytest.raises(ConfigurationError):
        load_settings()
