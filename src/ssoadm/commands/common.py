"""Common command infrastructure for ssoadm CLI commands.

This module provides shared functionality for all CLI commands including:
- The --profile option
- Profile and Identity Store validation
- Directory client construction
"""

import logging
from typing import Any, Dict, Optional, Tuple

import typer
from botocore.exceptions import ProfileNotFound
from rich.console import Console

from ..aws_clients.manager import AWSClientManager
from ..directory.identity_store import IdentityStoreDirectory
from ..utils.config import Config

# Shared instances
console = Console()
config = Config()
logger = logging.getLogger(__name__)


def profile_option() -> Any:
    """
    Create a standardized --profile option for commands.

    Returns:
        Typer option for profile selection
    """
    return typer.Option(
        None, "--profile", "-p", help="Profile to use (uses default profile if not specified)"
    )


def validate_profile(profile_name: Optional[str] = None) -> Tuple[str, Dict[str, Any]]:
    """
    Validate the profile and return profile name and data.

    Falls back to the SSOADM_PROFILE environment variable and then to the
    configured default profile when no name is given.

    Args:
        profile_name: Profile name to use

    Returns:
        Tuple of (profile_name, profile_data)

    Raises:
        typer.Exit: If no usable profile is found
    """
    profile_name = profile_name or config.get_default_profile()

    if not profile_name:
        console.print("[red]Error: No profile specified and no default profile set.[/red]")
        console.print(
            "Use --profile option or set a default profile with 'ssoadm profile set-default'."
        )
        raise typer.Exit(1)

    profiles = config.get("profiles", {})
    if profile_name not in profiles:
        console.print(f"[red]Error: Profile '{profile_name}' does not exist.[/red]")
        console.print("Use 'ssoadm profile add' to create a new profile.")
        raise typer.Exit(1)

    return profile_name, profiles[profile_name]


def validate_identity_store(profile_data: Dict[str, Any]) -> str:
    """
    Get the Identity Store ID configured for a profile.

    Args:
        profile_data: Profile data dictionary

    Returns:
        The Identity Store ID

    Raises:
        typer.Exit: If the profile has no Identity Store configured
    """
    identity_store_id = profile_data.get("identity_store_id")

    if not identity_store_id:
        console.print("[red]Error: No Identity Store configured for this profile.[/red]")
        console.print(
            "Use 'ssoadm profile update <name> --identity-store-id <id>' to configure one."
        )
        raise typer.Exit(1)

    return identity_store_id


def get_directory_client(profile: Optional[str] = None) -> IdentityStoreDirectory:
    """
    Build a directory client for a profile.

    Args:
        profile: Profile name to use

    Returns:
        IdentityStoreDirectory bound to the profile's Identity Store

    Raises:
        typer.Exit: If the profile is invalid or the AWS session cannot be validated
    """
    profile_name, profile_data = validate_profile(profile)
    identity_store_id = validate_identity_store(profile_data)

    aws_profile = profile_data.get("aws_profile", profile_name)
    try:
        aws_client = AWSClientManager(profile=aws_profile, region=profile_data.get("region"))
    except ProfileNotFound:
        console.print(f"[red]Error: AWS profile '{aws_profile}' is not configured.[/red]")
        console.print(
            "Configure it with 'aws configure sso' or set --aws-profile on the ssoadm profile."
        )
        raise typer.Exit(1)

    if not aws_client.validate_session():
        console.print("[red]Error: AWS session validation failed.[/red]")
        console.print("\n[yellow]This usually means:[/yellow]")
        console.print("1. Your AWS SSO token has expired")
        console.print("2. Your AWS credentials are invalid")
        console.print("3. Your profile configuration is incorrect")
        console.print(
            "\nRefresh your SSO login: [cyan]aws sso login --profile your-profile[/cyan]"
        )
        raise typer.Exit(1)

    logger.debug(
        f"Created directory client: profile={profile_name}, region={aws_client.region}, "
        f"identity_store={identity_store_id}"
    )
    return IdentityStoreDirectory(aws_client.get_identity_store_client(), identity_store_id)
