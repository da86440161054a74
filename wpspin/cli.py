"""Typer CLI entrypoint."""

from __future__ import annotations

import logging

import typer

from wpspin.core.errors import WpsPinError
from wpspin.core.model import DerivedPin
from wpspin.core.service import PinService
from wpspin.sources.static import StaticSerialSource

app = typer.Typer(help="Default WPS PIN derivation from access point BSSIDs")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def _build_service(
    bssid: str | None = None,
    serial_dir: str | None = None,
    serial: str | None = None,
) -> PinService:
    if serial is not None and serial_dir is not None:
        typer.echo("Error: --serial and --serial-dir cannot be combined", err=True)
        raise typer.Exit(code=1)
    if serial is not None and bssid is not None:
        service = PinService(serial_source=StaticSerialSource({bssid: serial}))
    else:
        service = PinService(serial_dir=serial_dir)
    for warning in getattr(service, "load_warnings", ()):
        typer.echo(f"Warning: {warning}", err=True)
    return service


@app.command("list")
def list_strategies() -> None:
    """List available derivation strategies."""
    try:
        service = _build_service()
        for strategy in service.list_strategies():
            extra = " (needs serial)" if strategy.id.requires_serial else ""
            typer.echo(f"{strategy.code}: {strategy.name}{extra}")
    except WpsPinError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from None


@app.command("profiles")
def list_profiles() -> None:
    """List vendor profiles with their suggested strategies and static PINs."""
    try:
        service = _build_service()
        profiles = service.list_profiles()
        if not profiles:
            typer.echo("No profiles loaded")
            raise typer.Exit(code=1)

        for profile in profiles:
            typer.echo(f"{profile.id}: {profile.name} ({len(profile.match.mac_prefix)} prefixes)")
            if profile.strategies:
                names = ", ".join(s.display_name for s in profile.strategies)
                typer.echo(f"  strategies: {names}")
            if profile.static_pins:
                typer.echo(f"  static: {', '.join(profile.static_pins)}")
    except WpsPinError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from None


@app.command("derive")
def derive(
    bssid: str,
    ssid: str | None = typer.Option(None, "--ssid", help="Network name (FTE needs it)"),
    strategy: str | None = typer.Option(None, "--strategy", "-s", help="Strategy code or name"),
    serial_dir: str | None = typer.Option(None, "--serial-dir", help="Directory holding <bssid>serial files"),
    serial: str | None = typer.Option(None, "--serial", help="Serial number for Belkin/Orange"),
) -> None:
    """Derive PINs for BSSID with one strategy, or with every strategy.

    With --strategy, derivation failures are reported as errors. Without it,
    only successful strategies are printed.
    """
    try:
        service = _build_service(bssid, serial_dir, serial)
        if strategy is not None:
            strategy_id = service.resolve_strategy(strategy)
            selected = service.registry.get(strategy_id)
            if selected is None:
                typer.echo(f"Error: Unsupported strategy '{strategy}'", err=True)
                raise typer.Exit(code=1)
            typer.echo(f"{selected.derive(bssid, ssid)}  {selected.name}")
            return

        found = False
        for item in service.list_strategies():
            result = service.generate_pin(item.id, bssid, ssid)
            if isinstance(result, DerivedPin):
                found = True
                typer.echo(f"{result.pin}  {result.name}")
        if not found:
            typer.echo("No strategy produced a PIN")
            raise typer.Exit(code=1)
    except WpsPinError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from None


@app.command("suggest")
def suggest(
    bssid: str,
    ssid: str | None = typer.Option(None, "--ssid", help="Network name (FTE needs it)"),
    serial_dir: str | None = typer.Option(None, "--serial-dir", help="Directory holding <bssid>serial files"),
    serial: str | None = typer.Option(None, "--serial", help="Serial number for Belkin/Orange"),
) -> None:
    """Print candidate PINs for BSSID, most likely first."""
    try:
        service = _build_service(bssid, serial_dir, serial)
        matched = service.matched_profiles(bssid)
        if matched:
            typer.echo(f"Matched profiles: {', '.join(p.name for p in matched)}")
        for candidate in service.candidate_pins(bssid, ssid):
            typer.echo(f"{candidate.pin}  {candidate.source}")
    except WpsPinError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from None


def run() -> None:
    app()


if __name__ == "__main__":
    run()
