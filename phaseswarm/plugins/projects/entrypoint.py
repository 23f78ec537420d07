# phaseswarm/plugins/projects/entrypoint.py
from __future__ import annotations

from phaseswarm.commands import command, CommandContext, CommandResult
from phaseswarm.db import (
    CorruptRegistry,
    Project,
    SelectionOutcome,
    parse_timestamp,
    read_registry,
    resolve_registry,
    select_projects,
    status_tag,
)
from phaseswarm.ui import colorize, log_error, log_info, log_warning, print_line


def _fmt_ts(value: object) -> str:
    """Render a stored timestamp in local time; unparseable values are shown as-is."""
    parsed = parse_timestamp(value)
    if parsed is None:
        return str(value)
    try:
        return parsed.astimezone().strftime("%Y-%m-%d %H:%M:%S")
    except (OverflowError, ValueError, OSError):
        # Out of range once shifted to local time
        return str(value)


def _print_project(index: int, project: Project) -> None:
    tag, color = status_tag(project)
    print_line(f"{colorize(f'{index}. {project.name}', 'bold')} {colorize(tag, color)}")
    print_line(f"   Path: {project.path}")
    if project.last_accessed:
        print_line(f"   Last accessed: {_fmt_ts(project.last_accessed)}")
    if project.prd_source:
        print_line(f"   PRD: {project.prd_source}")
    print_line("")


@command(
    name="list",
    description="List registered PhaseSwarm projects (--all: every project in the registry)",
    example="list --all",
    aliases=["ls", "projects"],
    flags={"--all": "show_all", "-a": "show_all"},
)
def list_projects(ctx: CommandContext, *, show_all: bool = False) -> CommandResult | None:
    config = ctx.config
    print_line("")
    print_line(colorize("PhaseSwarm Projects", "cyan"))
    print_line(colorize("===================", "cyan"))
    print_line("")

    resolved = resolve_registry(config.local_registry, config.global_registry)
    if resolved is None:
        log_warning('No registry found. Run "phaseswarm init" first.')
        print_line("")
        return None

    try:
        registry = read_registry(resolved.path)
    except CorruptRegistry as exc:
        log_error(f"Registry file is corrupted: {exc.reason}")
        log_info(f"Remove {resolved.path} and recreate it with: phaseswarm init")
        return CommandResult(ok=False)

    selection = select_projects(
        registry.projects, resolved.registry_type, str(config.working_dir), show_all)

    if selection.outcome is SelectionOutcome.EMPTY:
        log_info("No projects registered yet.")
        print_line("")
        print_line("To create a PhaseSwarm project, run /phaseswarm-create in Claude Code.")
        print_line("")
        return CommandResult(ok=True, data=[])

    if selection.outcome is SelectionOutcome.NO_MATCH:
        log_info("No projects found for this directory.")
        print_line("")
        print_line(f"{selection.total} project(s) are registered for other directories.")
        print_line('Use "phaseswarm list --all" to show all projects.')
        print_line("")
        return CommandResult(ok=True, data=[])

    for index, project in enumerate(selection.projects, start=1):
        _print_project(index, project)

    if len(selection.projects) < selection.total:
        print_line(
            f"Showing {len(selection.projects)} of {selection.total} projects "
            '(use "phaseswarm list --all" to show all).')
    print_line(colorize(f"Registry: {resolved.path} ({resolved.registry_type})", "cyan"))
    print_line("")
    return CommandResult(ok=True, data=selection.projects)
