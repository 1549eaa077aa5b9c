import sys

import pytest

from tests.fake.fake_sink import FakeSink
from urlparams.bootstrap.config.loader import get_cli_args, get_configfile
from urlparams.bootstrap.deps import get_serializer_config, get_settings
from urlparams.core.ser.params import ParamsSerializer
from urlparams.infra.percent import QueryEncoder


@pytest.fixture
def sink():
    return FakeSink()


@pytest.fixture
def serializer(sink):
    return ParamsSerializer(sink, QueryEncoder())


def _clear_caches() -> None:
    get_cli_args.cache_clear()
    get_configfile.cache_clear()
    get_settings.cache_clear()
    get_serializer_config.cache_clear()


@pytest.fixture
def cli_argv(monkeypatch, tmp_path):
    """
    Run the command line layer in isolation: a clean working directory,
    no URLPARAMS environment, and `sys.argv` set by the test.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("URLPARAMSCONFIG", raising=False)
    for name in ("URLPARAMS_SPACE", "URLPARAMS_ENCODE_KEYS", "URLPARAMS_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    def set_argv(*argv: str) -> None:
        monkeypatch.setattr(sys, "argv", ["urlparams", *argv])
        _clear_caches()

    set_argv()
    try:
        yield set_argv
    finally:
        _clear_caches()
