from __future__ import annotations

import pytest

from phaseswarm.commands import REGISTRY, Command, CommandRegistry


def _cmd(name: str, *aliases: str) -> Command:
    return Command(name=name, description="", example="", callback=lambda: None,
                   aliases=list(aliases))


def test_lookup_is_case_insensitive_and_covers_aliases() -> None:
    registry = CommandRegistry()
    listing = _cmd("list", "ls", "Projects")
    registry.register(listing)

    assert registry.get("LIST") is listing
    assert registry.get("projects") is listing
    assert registry.get("nope") is None
    assert registry.all() == [listing]
    assert sorted(registry.names()) == ["list", "ls", "projects"]


@pytest.mark.parametrize("clash", [_cmd("list"), _cmd("other", "LS"), _cmd("ls")])
def test_clashing_names_are_rejected(clash: Command) -> None:
    registry = CommandRegistry()
    registry.register(_cmd("list", "ls"))
    with pytest.raises(ValueError):
        registry.register(clash)


def test_plugins_register_their_commands() -> None:
    from phaseswarm.interface import load_commands

    load_commands()
    assert REGISTRY.get("install") is REGISTRY.get("init")
    assert REGISTRY.get("init").category == "installer"
    assert REGISTRY.get("ls").flags["-a"] == "show_all"


def test_rejected_command_leaves_no_partial_entries() -> None:
    registry = CommandRegistry()
    registry.register(_cmd("list", "ls"))
    with pytest.raises(ValueError):
        registry.register(_cmd("other", "LS"))
    assert registry.get("other") is None
    assert len(registry.all()) == 1
