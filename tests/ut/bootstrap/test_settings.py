import pytest
import yaml

from urlparams.bootstrap.config.loader import get_configfile
from urlparams.bootstrap.deps import get_serializer_config, get_settings
from urlparams.core.models.config import SerializerConfig, SpaceEncoding


@pytest.mark.ut
def test_defaults(cli_argv):
    settings = get_settings()

    assert settings.space == SpaceEncoding.plus
    assert settings.encode_keys is False
    assert settings.log_level == "INFO"
    assert get_configfile() is None
    assert get_serializer_config() == SerializerConfig()


@pytest.mark.ut
def test_environment(cli_argv, monkeypatch):
    monkeypatch.setenv("URLPARAMS_SPACE", "percent")
    monkeypatch.setenv("URLPARAMS_ENCODE_KEYS", "true")

    config = get_serializer_config()

    assert config == SerializerConfig(space=SpaceEncoding.percent, encode_keys=True)


@pytest.mark.ut
def test_config_file_from_cli(cli_argv, tmp_path):
    file = tmp_path / "custom.yaml"
    file.write_text(yaml.dump({"space": "percent", "log_level": "DEBUG"}))
    cli_argv("--config", str(file))

    settings = get_settings()

    assert get_configfile() == file
    assert settings.space == SpaceEncoding.percent
    assert settings.log_level == "DEBUG"


@pytest.mark.ut
def test_config_file_from_environment(cli_argv, monkeypatch, tmp_path):
    file = tmp_path / "env.yaml"
    file.write_text(yaml.dump({"encode_keys": True}))
    monkeypatch.setenv("URLPARAMSCONFIG", str(file))

    assert get_settings().encode_keys is True


@pytest.mark.ut
def test_default_config_file_in_working_directory(cli_argv, tmp_path):
    (tmp_path / "urlparams.yaml").write_text(yaml.dump({"space": "percent"}))

    assert get_configfile() == tmp_path / "urlparams.yaml"
    assert get_settings().space == SpaceEncoding.percent


@pytest.mark.ut
def test_priority_cli_over_env_over_file(cli_argv, monkeypatch, tmp_path):
    (tmp_path / "urlparams.yaml").write_text(
        yaml.dump({"space": "percent", "encode_keys": True, "log_level": "ERROR"})
    )
    monkeypatch.setenv("URLPARAMS_LOG_LEVEL", "WARNING")
    monkeypatch.setenv("URLPARAMS_SPACE", "percent")
    cli_argv("--space", "plus")

    settings = get_settings()

    assert settings.space == SpaceEncoding.plus
    assert settings.log_level == "WARNING"
    assert settings.encode_keys is True


@pytest.mark.ut
def test_missing_config_file(cli_argv, tmp_path):
    cli_argv("--config", str(tmp_path / "missing.yaml"))

    with pytest.raises(SystemExit) as ex:
        get_settings()

    assert "Configuration file not found" in str(ex.value.code)


@pytest.mark.ut
def test_invalid_config_value(cli_argv, tmp_path):
    (tmp_path / "urlparams.yaml").write_text(yaml.dump({"space": "sideways"}))

    with pytest.raises(SystemExit) as ex:
        get_settings()

    message = str(ex.value.code)
    assert message.startswith("Configuration validation failed:")
    assert "space:" in message
