import pytest

from prefutils.config import (
    DEFAULT_CONFIG_PATH,
    ENV_CONFIG,
    PrefsConfig,
    StoreConfig,
    load_config,
    resolve_config_path,
)
from prefutils.errors import PrefConfigError


def test_missing_config_yields_defaults(tmp_path):
    cfg = load_config(tmp_path / "nope.yml")
    assert cfg.log_level == "WARNING"
    assert cfg.store.backend == "file"
    assert cfg.store.serializer == "json"
    assert cfg.store.autosave is True
    assert cfg == PrefsConfig(store=StoreConfig())


def test_load_config_from_yaml(tmp_path):
    p = tmp_path / "prefutils.yml"
    p.write_text(
        "log_level: DEBUG\n"
        "store:\n"
        "  backend: memory\n"
        "  serializer: yaml\n"
        "  autosave: false\n",
        encoding="utf-8",
    )
    cfg = load_config(p)
    assert cfg.log_level == "DEBUG"
    assert cfg.store.backend == "memory"
    assert cfg.store.serializer == "yaml"
    assert cfg.store.autosave is False


@pytest.mark.parametrize("text", [
    "- a\n- b\n",
    "store: [unclosed\n",
    "store:\n  backend: redis\n",
    "store:\n  serializer: encrypted\n",
])
def test_invalid_config(tmp_path, text):
    p = tmp_path / "bad.yml"
    p.write_text(text, encoding="utf-8")
    with pytest.raises(PrefConfigError):
        load_config(p)


def test_resolve_config_path(monkeypatch, tmp_path):
    monkeypatch.delenv(ENV_CONFIG, raising=False)
    assert resolve_config_path() == DEFAULT_CONFIG_PATH
    monkeypatch.setenv(ENV_CONFIG, str(tmp_path / "env.yml"))
    assert resolve_config_path() == tmp_path / "env.yml"
    assert resolve_config_path(tmp_path / "explicit.yml") == tmp_path / "explicit.yml"
