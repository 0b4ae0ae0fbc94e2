"""Profile management commands for ssoadm."""

from typing import Optional

import typer
from rich.table import Table

from ..utils.validators import validate_identity_store_id
from .common import config, console

app = typer.Typer(help="Manage profiles that point ssoadm at an Identity Store.")


@app.command("list")
def list_profiles():
    """List all configured profiles."""
    profiles = config.get("profiles", {})

    if not profiles:
        console.print("No profiles configured. Use 'ssoadm profile add' to add a profile.")
        return

    table = Table(title="Profiles")
    table.add_column("Name", style="cyan")
    table.add_column("Region", style="green")
    table.add_column("Identity Store", style="magenta")
    table.add_column("Default", style="yellow")

    default_profile = config.get_default_profile()

    for name, profile_data in profiles.items():
        is_default = "✓" if name == default_profile else ""
        table.add_row(
            name,
            profile_data.get("region", ""),
            profile_data.get("identity_store_id", ""),
            is_default,
        )

    console.print(table)


@app.command("add")
def add_profile(
    name: str = typer.Argument(..., help="Profile name"),
    region: str = typer.Option(..., "--region", help="AWS region of the Identity Store"),
    identity_store_id: str = typer.Option(
        ..., "--identity-store-id", "-i", help="Identity Store ID (d-xxxxxxxxxx)"
    ),
    aws_profile: Optional[str] = typer.Option(
        None, "--aws-profile", help="AWS CLI profile for credentials (defaults to the profile name)"
    ),
    set_default: bool = typer.Option(False, "--default", help="Set as default profile"),
):
    """Add a new profile."""
    profiles = config.get("profiles", {})

    if name in profiles:
        console.print(
            f"[yellow]Profile '{name}' already exists. Use 'ssoadm profile update' to modify it.[/yellow]"
        )
        return

    if not validate_identity_store_id(identity_store_id):
        raise typer.Exit(1)

    profiles[name] = {"region": region, "identity_store_id": identity_store_id}
    if aws_profile:
        profiles[name]["aws_profile"] = aws_profile

    config.set("profiles", profiles)

    if set_default or not config.get("default_profile"):
        config.set("default_profile", name)
        console.print(f"[green]Profile '{name}' added and set as default.[/green]")
    else:
        console.print(f"[green]Profile '{name}' added.[/green]")


@app.command("update")
def update_profile(
    name: str = typer.Argument(..., help="Profile name"),
    region: Optional[str] = typer.Option(None, "--region", help="AWS region"),
    identity_store_id: Optional[str] = typer.Option(
        None, "--identity-store-id", "-i", help="Identity Store ID"
    ),
    aws_profile: Optional[str] = typer.Option(None, "--aws-profile", help="AWS CLI profile"),
    set_default: bool = typer.Option(False, "--default", help="Set as default profile"),
):
    """Update an existing profile."""
    profiles = config.get("profiles", {})

    if name not in profiles:
        console.print(
            f"[red]Profile '{name}' does not exist. Use 'ssoadm profile add' to create it.[/red]"
        )
        raise typer.Exit(1)

    if identity_store_id:
        if not validate_identity_store_id(identity_store_id):
            raise typer.Exit(1)
        profiles[name]["identity_store_id"] = identity_store_id

    if region:
        profiles[name]["region"] = region

    if aws_profile:
        profiles[name]["aws_profile"] = aws_profile

    config.set("profiles", profiles)

    if set_default:
        config.set("default_profile", name)
        console.print(f"[green]Profile '{name}' updated and set as default.[/green]")
    else:
        console.print(f"[green]Profile '{name}' updated.[/green]")


@app.command("remove")
def remove_profile(
    name: str = typer.Argument(..., help="Profile name"),
    force: bool = typer.Option(False, "--force", "-f", help="Force removal without confirmation"),
):
    """Remove a profile."""
    profiles = config.get("profiles", {})

    if name not in profiles:
        console.print(f"[red]Profile '{name}' does not exist.[/red]")
        raise typer.Exit(1)

    if not force:
        confirm = typer.confirm(f"Are you sure you want to remove profile '{name}'?")
        if not confirm:
            console.print("Operation cancelled.")
            return

    del profiles[name]
    config.set("profiles", profiles)

    if config.get("default_profile") == name:
        if profiles:
            new_default = next(iter(profiles.keys()))
            config.set("default_profile", new_default)
            console.print(f"[yellow]Default profile changed to '{new_default}'.[/yellow]")
        else:
            config.delete("default_profile")

    console.print(f"[green]Profile '{name}' removed.[/green]")


@app.command("set-default")
def set_default_profile(name: str = typer.Argument(..., help="Profile name")):
    """Set the default profile."""
    profiles = config.get("profiles", {})

    if name not in profiles:
        console.print(
            f"[red]Profile '{name}' does not exist. Use 'ssoadm profile add' to create it.[/red]"
        )
        raise typer.Exit(1)

    config.set("default_profile", name)
    console.print(f"[green]Default profile set to '{name}'.[/green]")
