from selfie_relay.config import provider_config


def test_fal_key_prefers_environment(monkeypatch, tmp_path):
    (tmp_path / "config").mkdir()
    (tmp_path / "config" / "fal.key").write_text("from-file\n")
    monkeypatch.setenv("FAL_KEY", " from-env ")

    assert provider_config.get_fal_key() == "from-env"


def test_fal_key_read_from_key_file(tmp_path):
    (tmp_path / "config").mkdir()
    (tmp_path / "config" / "fal.key").write_text("from-file\n")

    assert provider_config.get_fal_key() == "from-file"


def test_fal_key_missing():
    assert provider_config.get_fal_key() is None


def test_blank_environment_value_falls_through_to_key_file(monkeypatch, tmp_path):
    (tmp_path / "config").mkdir()
    (tmp_path / "config" / "fal.key").write_text("from-file\n")
    monkeypatch.setenv("FAL_KEY", "   ")

    assert provider_config.get_fal_key() == "from-file"
    assert provider_config.load_key(None, "FAL_KEY") is None


def test_gateway_settings(monkeypatch):
    assert provider_config.get_gateway_url() == "http://localhost:18789"
    assert provider_config.get_gateway_token() is None

    monkeypatch.setenv("OPENCLAW_GATEWAY_URL", "https://gw.example/ ")
    monkeypatch.setenv("OPENCLAW_GATEWAY_TOKEN", "tok")
    assert provider_config.get_gateway_url() == "https://gw.example"
    assert provider_config.get_gateway_token() == "tok"
