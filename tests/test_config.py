from __future__ import annotations

from pathlib import Path

import pytest

from phaseswarm.db import BUNDLED_TEMPLATES_DIR, load_config


def _load(tmp_path: Path, env: dict[str, str] | None = None):
    return load_config(cwd=tmp_path, environ=env or {}, home=tmp_path / "home")


def test_defaults(tmp_path: Path) -> None:
    config = _load(tmp_path)
    assert config.working_dir == tmp_path
    assert config.commands_dir == tmp_path / ".claude" / "commands"
    assert config.templates_dir == BUNDLED_TEMPLATES_DIR
    assert config.local_registry == tmp_path / ".phaseswarm-registry.json"
    assert config.global_registry == tmp_path / "home" / ".phaseswarm-registry.json"
    assert config.log_level == "WARNING"
    assert config.log_file is None
    assert config.color is True


def test_environment_overrides_files(tmp_path: Path) -> None:
    (tmp_path / "phaseswarm.toml").write_text(
        'log_level = "INFO"\ncolor = false\n', encoding="utf-8")
    config = _load(tmp_path, {"PHASESWARM_LOG_LEVEL": "debug", "LOG_LEVEL": "ERROR"})
    assert config.log_level == "DEBUG"
    assert config.color is False


def test_nested_json_is_flattened(tmp_path: Path) -> None:
    (tmp_path / "phaseswarm.json").write_text(
        '{"global": {"registry": "shared/registry.json"}, "log": {"file": "ps.log"}}',
        encoding="utf-8")
    config = _load(tmp_path)
    assert config.global_registry == tmp_path / "shared" / "registry.json"
    assert config.log_file == tmp_path / "ps.log"


def test_dotenv_only_contributes_prefixed_keys(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text(
        "# comment\nLOG_LEVEL=ERROR\nexport PHASESWARM_COMMANDS_DIR='cmds'\n", encoding="utf-8")
    config = _load(tmp_path)
    assert config.log_level == "WARNING"
    assert config.commands_dir == tmp_path / "cmds"


def test_absolute_and_home_paths(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path / "userhome"))
    config = _load(tmp_path, {
        "PHASESWARM_TEMPLATES_DIR": str(tmp_path / "tpl"),
        "PHASESWARM_LOCAL_REGISTRY": "~/local.json",
    })
    assert config.templates_dir == tmp_path / "tpl"
    assert config.local_registry == tmp_path / "userhome" / "local.json"


def test_unknown_keys_are_kept_as_extra(tmp_path: Path) -> None:
    config = _load(tmp_path, {"PHASESWARM_THEME": "dark"})
    assert config.extra == {"THEME": "dark"}


@pytest.mark.parametrize(
    "env",
    [
        {"PHASESWARM_LOG_LEVEL": "LOUD"},
        {"PHASESWARM_COLOR": "sometimes"},
    ],
)
def test_invalid_values_raise(tmp_path: Path, env: dict[str, str]) -> None:
    with pytest.raises(ValueError):
        _load(tmp_path, env)


def test_home_as_working_directory_shares_one_registry(tmp_path: Path) -> None:
    config = load_config(cwd=tmp_path, environ={}, home=tmp_path)
    assert config.local_registry == config.global_registry
