import pytest

import main
from wikidle.config import Config, TestingConfig


def test_resolve_config():
    assert main.resolve_config('testing') is TestingConfig
    assert main.resolve_config('default') is Config


def test_resolve_unknown_config():
    with pytest.raises(ValueError, match="Unknown WIKIDLE_ENV 'prod'. Must be one of: development"):
        main.resolve_config('prod')


def test_main_exits_on_unknown_environment(monkeypatch, capsys):
    monkeypatch.setenv('WIKIDLE_ENV', 'staging')

    with pytest.raises(SystemExit) as exc_info:
        main.main()

    assert exc_info.value.code == 1
    assert "Unknown WIKIDLE_ENV 'staging'" in capsys.readouterr().out
