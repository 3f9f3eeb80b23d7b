"""CLI for rendering the multimodal prompt and driving the capability panel."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click
from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from multimodal_prompt.config import Settings
from multimodal_prompt.errors import MultimodalPromptError
from multimodal_prompt.models import (
    Capability,
    CapabilityFlags,
    DesignScheme,
    DeviceType,
    EnvironmentalContext,
    MediaType,
    MultimodalContext,
    NetworkCondition,
    SupabaseConnection,
    SupabaseCredentials,
    SupabaseState,
)
from multimodal_prompt.panel import CapabilityPanel
from multimodal_prompt.prompts import get_enhanced_multimodal_prompt

logger = logging.getLogger(__name__)

console = Console()

CAPABILITY_NAMES = [c.value for c in Capability]


def _load_settings(ctx: click.Context) -> Settings:
    settings = ctx.obj.get("settings") if ctx.obj else None
    return settings or Settings()


def _read_json(path: str) -> dict:
    try:
        return json.loads(Path(path).read_text())
    except (OSError, json.JSONDecodeError) as e:
        raise click.ClickException(f"Cannot read {path}: {e}") from e


def _build_context(
    context_file: str | None,
    media_type: str | None,
    device: str | None,
    network: str | None,
    accessibility: bool | None,
) -> MultimodalContext | None:
    """Combine --context-file with the individual context options."""
    context = MultimodalContext.from_dict(_read_json(context_file)) if context_file else None
    if not any([media_type, device, network, accessibility is not None]):
        return context

    context = context or MultimodalContext()
    if media_type:
        context = context.merged("current_media_type", MediaType(media_type))

    env = context.environmental_context or EnvironmentalContext()
    changes: dict = {}
    if device:
        changes["device_type"] = DeviceType(device)
    if network:
        changes["network_conditions"] = NetworkCondition(network)
    if accessibility is not None:
        changes["accessibility"] = accessibility
    if changes:
        context = context.merged("environmental_context", env.model_copy(update=changes))
    return context


def _build_supabase(
    state: str | None, url: str | None, key: str | None, default: SupabaseConnection | None
) -> SupabaseConnection | None:
    if state is None:
        if not (url or key):
            return default
        state = SupabaseState.CONNECTED.value
    state = SupabaseState(state)
    credentials = SupabaseCredentials(supabase_url=url, anon_key=key) if url or key else None
    return SupabaseConnection(
        is_connected=state is not SupabaseState.DISCONNECTED,
        has_selected_project=state is SupabaseState.CONNECTED,
        credentials=credentials,
    )


def render_capability_table(flags: CapabilityFlags) -> Table:
    table = Table(title=f"Multimodal Capabilities ({flags.active_count} active)")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Title")
    table.add_column("Enabled")
    table.add_column("Description", style="dim")
    for capability in Capability:
        enabled = flags[capability]
        table.add_row(
            capability.value,
            capability.info.title,
            "[green]on[/green]" if enabled else "[dim]off[/dim]",
            capability.info.description,
        )
    return table


# ---------------------------------------------------------------------------
# Interactive panel
# ---------------------------------------------------------------------------


class PanelState:
    """Parent-side owner of the values the panel emits."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.capabilities = settings.capabilities
        self.context = MultimodalContext()

    def on_capabilities_change(self, flags: CapabilityFlags) -> None:
        self.capabilities = flags

    def on_context_change(self, context: MultimodalContext) -> None:
        self.context = context

    def prompt(self) -> str:
        return get_enhanced_multimodal_prompt(
            cwd=self.settings.working_directory,
            supabase=self.settings.supabase,
            design_scheme=self.settings.design_scheme,
            capabilities=self.capabilities,
            context=self.context,
            allowed_html_elements=self.settings.allowed_html_elements,
        )


def _handle_command(cmd: str, panel: CapabilityPanel, state: PanelState) -> None:
    """Handle a single panel command."""
    parts = cmd.split(maxsplit=1)
    command = parts[0].lower()
    arg = parts[1].strip() if len(parts) > 1 else ""

    if command == "toggle":
        panel.toggle(arg)
        console.print(render_capability_table(state.capabilities))

    elif command == "all":
        panel.enable_all()
        console.print(render_capability_table(state.capabilities))

    elif command == "none":
        panel.disable_all()
        console.print(render_capability_table(state.capabilities))

    elif command == "media":
        panel.set_media_type(arg or None)
        console.print(f"[dim]Media type: {arg or 'not specified'}[/dim]")

    elif command == "device":
        panel.set_device_type(arg or None)
        console.print(f"[dim]Device: {arg or 'not specified'}[/dim]")

    elif command == "network":
        panel.set_network_conditions(arg or None)
        console.print(f"[dim]Network: {arg or 'not specified'}[/dim]")

    elif command == "a11y":
        if arg not in ("on", "off"):
            console.print("[dim]Usage: a11y on|off[/dim]")
            return
        panel.set_accessibility(arg == "on")
        console.print(f"[dim]Accessibility: {arg}[/dim]")

    elif command == "advanced":
        is_open = panel.toggle_advanced()
        shown = panel.advanced_capabilities if is_open else panel.quick_capabilities
        console.print(f"[dim]Advanced controls {'open' if is_open else 'closed'}[/dim]")
        for capability in shown:
            mark = "[green]●[/green]" if panel.is_enabled(capability) else "[dim]○[/dim]"
            console.print(f"  {mark} {capability.value:24} {capability.info.title}")

    elif command == "status":
        console.print(Panel(panel.status_summary(), title="Capability Status", border_style="magenta"))

    elif command == "prompt":
        console.print(state.prompt(), markup=False, highlight=False)

    elif command == "help":
        console.print("\n[bold]Commands:[/bold]")
        console.print("  toggle NAME   — Toggle one capability")
        console.print("  all / none    — Enable or disable every capability")
        console.print("  media TYPE    — Set media type (empty clears)")
        console.print("  device TYPE   — Set device type (empty clears)")
        console.print("  network TYPE  — Set network conditions (empty clears)")
        console.print("  a11y on|off   — Toggle accessibility mode")
        console.print("  advanced      — Open or close the advanced controls")
        console.print("  status        — Show the capability status summary")
        console.print("  prompt        — Print the generated prompt")
        console.print("  exit          — Quit")
        console.print()

    else:
        console.print(f"[dim]Unknown command: {command}. Try help[/dim]")


def run_panel(settings: Settings) -> None:
    """Run the interactive capability panel REPL."""
    state = PanelState(settings)
    panel = CapabilityPanel(
        state.capabilities,
        on_capabilities_change=state.on_capabilities_change,
        context=state.context,
        on_context_change=state.on_context_change,
    )

    console.print(Panel("[bold]Multimodal Controls[/bold]", border_style="magenta"))
    console.print(render_capability_table(state.capabilities))
    console.print("[dim]Type a command. 'help' for commands, Ctrl+C or 'exit' to quit.[/dim]\n")

    history_dir = Path(settings.data_dir)
    history_dir.mkdir(parents=True, exist_ok=True)
    session = PromptSession(history=FileHistory(settings.history_path))

    try:
        while True:
            try:
                user_input = session.prompt("▶ ").strip()
            except EOFError:
                break

            if not user_input:
                continue
            if user_input.lower() in ("exit", "quit"):
                break

            try:
                _handle_command(user_input, panel, state)
            except (MultimodalPromptError, ValueError) as e:
                console.print(f"[red]Error: {e}[/red]")

    except KeyboardInterrupt:
        console.print("\n[dim]Bye![/dim]")


# ---------------------------------------------------------------------------
# Click entry points
# ---------------------------------------------------------------------------


@click.group()
@click.option("-c", "--config", "config_path", default=None, help="Path to config file")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Override the configured log level",
)
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, log_level: str | None) -> None:
    """Multimodal prompt builder and capability controls."""
    try:
        settings = Settings.load(config_path)
    except MultimodalPromptError as e:
        raise click.ClickException(str(e)) from e

    logging.basicConfig(level=(log_level or settings.log_level).upper())
    logger.debug("Settings loaded (working directory %s)", settings.working_directory)
    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings


@cli.command()
@click.option("--enable", "enabled", multiple=True, type=click.Choice(CAPABILITY_NAMES),
              help="Enable a capability (repeatable)")
@click.option("--all", "enable_all", is_flag=True, help="Enable every capability")
@click.option("--cwd", default=None, help="Working directory passed to the prompt")
@click.option("--media-type", type=click.Choice([m.value for m in MediaType]), default=None)
@click.option("--device", type=click.Choice([d.value for d in DeviceType]), default=None)
@click.option("--network", type=click.Choice([n.value for n in NetworkCondition]), default=None)
@click.option("--accessibility/--no-accessibility", default=None)
@click.option("--context-file", type=click.Path(exists=True, dir_okay=False), default=None,
              help="JSON file with a multimodal context")
@click.option("--design-scheme", "design_scheme_file", type=click.Path(exists=True, dir_okay=False),
              default=None, help="JSON file with a design scheme")
@click.option("--supabase-state", type=click.Choice([s.value for s in SupabaseState]), default=None)
@click.option("--supabase-url", default=None)
@click.option("--supabase-key", default=None)
@click.pass_context
def show(
    ctx: click.Context,
    enabled: tuple[str, ...],
    enable_all: bool,
    cwd: str | None,
    media_type: str | None,
    device: str | None,
    network: str | None,
    accessibility: bool | None,
    context_file: str | None,
    design_scheme_file: str | None,
    supabase_state: str | None,
    supabase_url: str | None,
    supabase_key: str | None,
) -> None:
    """Print the generated prompt."""
    settings = _load_settings(ctx)

    flags = CapabilityFlags.all() if enable_all else settings.capabilities.with_enabled(enabled)

    try:
        context = _build_context(context_file, media_type, device, network, accessibility)
        design_scheme = settings.design_scheme
        if design_scheme_file:
            design_scheme = DesignScheme.model_validate(_read_json(design_scheme_file))
    except (MultimodalPromptError, ValueError) as e:
        raise click.ClickException(str(e)) from e

    prompt = get_enhanced_multimodal_prompt(
        cwd=cwd or settings.working_directory,
        supabase=_build_supabase(supabase_state, supabase_url, supabase_key, settings.supabase),
        design_scheme=design_scheme,
        capabilities=flags,
        context=context,
        allowed_html_elements=settings.allowed_html_elements,
    )
    click.echo(prompt)


@cli.command()
@click.pass_context
def capabilities(ctx: click.Context) -> None:
    """List capabilities and whether the configuration enables them."""
    console.print(render_capability_table(_load_settings(ctx).capabilities))


@cli.command()
@click.pass_context
def panel(ctx: click.Context) -> None:
    """Start the interactive capability panel."""
    run_panel(_load_settings(ctx))


def main() -> None:
    """Entry point."""
    cli()


if __name__ == "__main__":
    main()
