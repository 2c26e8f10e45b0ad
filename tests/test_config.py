from esmapping.config import get_settings


def test_default_settings(settings_env):
    settings = get_settings()
    assert settings.elastic_host == "http://localhost:9200"
    assert settings.elastic_password is None
    assert settings.elastic_verify_ssl is False


def test_password_defaults_to_https(settings_env):
    settings_env.setenv("ESMAPPING_ELASTIC_PASSWORD", "secret")
    assert get_settings().elastic_host == "https://localhost:9200"


def test_remote_host_verifies_ssl(settings_env):
    settings_env.setenv("ESMAPPING_ELASTIC_HOST", "https://elastic.example.com:9200")
    settings = get_settings()
    assert settings.elastic_host == "https://elastic.example.com:9200"
    assert settings.elastic_verify_ssl is True


def test_env_file(settings_env, tmp_path):
    (tmp_path / ".env").write_text("esmapping_elastic_host=http://es.example.com:9200\n")
    assert get_settings().elastic_host == "http://es.example.com:9200"
