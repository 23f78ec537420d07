# phaseswarm/plugins/installer/entrypoint.py
from __future__ import annotations

from pathlib import Path

from phaseswarm.commands import command, CommandContext, CommandResult
from phaseswarm.db import create_registry
from phaseswarm.install import (
    SLASH_COMMANDS,
    InstallError,
    MissingTemplate,
    ensure_commands_dir,
    install_templates,
    verify_installation,
)
from phaseswarm.interface import ask_registry_type
from phaseswarm.ui import (
    colorize,
    log_error,
    log_info,
    log_success,
    log_warning,
    print_banner,
    print_line,
)


def _display_path(path: Path) -> str:
    """Shorten paths under the home directory to ~/... for prompts."""
    try:
        return "~/" + path.relative_to(Path.home()).as_posix()
    except ValueError:
        return str(path)


def _choose_registry_type(ctx: CommandContext, use_global: bool, use_local: bool) -> str:
    if use_global:
        return "global"
    if use_local:
        return "local"
    return ask_registry_type(
        local_path=_display_path(ctx.config.local_registry),
        global_path=_display_path(ctx.config.global_registry),
    )


def _print_usage(commands_dir: Path, registry_path: Path) -> None:
    rule = colorize("=" * 38, "green")
    print_line("")
    print_line(rule)
    log_success("PhaseSwarm installed successfully!")
    print_line(rule)
    print_line("")
    print_line("Usage:")
    for index, (name, description) in enumerate(SLASH_COMMANDS.items(), start=1):
        print_line("")
        print_line(f"  {index}. {description}:")
        print_line(colorize(f"     /{name}", "blue"))
    print_line("")
    print_line(f"Commands installed to: {colorize(str(commands_dir), 'green')}")
    print_line(f"Registry location: {colorize(str(registry_path), 'green')}")
    print_line("")


@command(
    name="init",
    description="Install PhaseSwarm commands to .claude/commands/",
    example="init --global",
    aliases=["install"],
    flags={"--global": "use_global", "-g": "use_global",
           "--local": "use_local", "-l": "use_local"},
)
def init(ctx: CommandContext, *, use_global: bool = False, use_local: bool = False) -> CommandResult:
    if use_global and use_local:
        return CommandResult(ok=False, message="Choose either --global or --local, not both.")

    config = ctx.config
    print_line("")
    print_banner(["    PhaseSwarm Initializer", "    Multi-Phase Agent Orchestration"])
    print_line("")

    # Step 1: commands directory
    log_info("Creating .claude/commands directory...")
    try:
        if ensure_commands_dir(config.commands_dir):
            log_success(f"Created {config.commands_dir}")
        else:
            log_warning(f"Directory already exists: {config.commands_dir}")
    except InstallError as exc:
        return CommandResult(ok=False, message=str(exc))

    # Step 2: templates
    log_info("Installing PhaseSwarm commands...")
    try:
        installed = install_templates(config.templates_dir, config.commands_dir)
    except MissingTemplate as exc:
        log_error(str(exc))
        return CommandResult(ok=False, message="Package may be corrupted. Try reinstalling.")
    except InstallError as exc:
        return CommandResult(ok=False, message=str(exc))
    for item in installed:
        if item.overwritten:
            log_warning(f"{item.name} already existed, overwritten")
        log_success(f"Installed {item.name}")

    # Step 3: registry (a missing registry is a soft dependency)
    print_line("")
    registry_type = _choose_registry_type(ctx, use_global, use_local)
    registry_path = config.global_registry if registry_type == "global" else config.local_registry
    log_info(f"Checking PhaseSwarm {registry_type} registry...")
    try:
        if create_registry(registry_path, registry_type):
            log_success(f"Created registry at {registry_path}")
        else:
            log_warning(f"Registry already exists at {registry_path}")
    except OSError as exc:
        ctx.logger.debug("Registry creation failed", exc_info=True)
        log_error(f"Failed to create registry: {exc}")

    # Step 4: verify
    log_info("Verifying installation...")
    report = verify_installation(config.commands_dir)
    for target, present in report.items():
        if present:
            log_success(f"  Found: {target}")
        else:
            log_error(f"  Missing: {target}")
    if registry_path.is_file():
        log_success(f"  Found: {registry_path}")
    else:
        log_warning(f"  Missing: {registry_path} (optional)")

    if not all(report.values()):
        return CommandResult(ok=False, message="Installation incomplete. Please check errors above.")

    _print_usage(config.commands_dir, registry_path)
    return CommandResult(ok=True, data={
        "commands_dir": config.commands_dir,
        "registry_path": registry_path,
        "registry_type": registry_type,
    })
