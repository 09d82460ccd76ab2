import importlib

import phaset_mcp.config as config


def test_config_defaults(monkeypatch):
    for name in ("PHASET_MAX_DEPTH", "PHASET_MAX_FILE_CHARS", "PHASET_MAX_TOTAL_TOKENS", "PHASET_SCHEMA_PATH"):
        monkeypatch.delenv(name, raising=False)
    module = importlib.reload(config)

    budgets = module.default_budgets()
    assert budgets.max_depth == 10
    assert budgets.max_file_chars == 50000
    assert budgets.max_total_tokens == 15000
    assert module.SCHEMA_PATH == module.DEFAULT_SCHEMA_PATH


def test_config_uses_env(monkeypatch, tmp_path):
    monkeypatch.setenv("PHASET_MAX_TOTAL_TOKENS", "42")
    monkeypatch.setenv("PHASET_SCHEMA_PATH", str(tmp_path / "schema.yml"))
    module = importlib.reload(config)

    assert module.default_budgets().max_total_tokens == 42
    assert module.SCHEMA_PATH == str(tmp_path / "schema.yml")

    monkeypatch.delenv("PHASET_MAX_TOTAL_TOKENS")
    monkeypatch.delenv("PHASET_SCHEMA_PATH")
    importlib.reload(config)


def test_config_handles_invalid_values(monkeypatch, capsys):
    monkeypatch.setenv("PHASET_MAX_DEPTH", "lots")
    monkeypatch.setenv("PHASET_MAX_FILE_CHARS", "-5")
    module = importlib.reload(config)
    captured = capsys.readouterr()

    assert "Warning" in captured.err
    assert module.MAX_DEPTH == 10
    assert module.MAX_FILE_CHARS == 50000

    monkeypatch.delenv("PHASET_MAX_DEPTH")
    monkeypatch.delenv("PHASET_MAX_FILE_CHARS")
    importlib.reload(config)
