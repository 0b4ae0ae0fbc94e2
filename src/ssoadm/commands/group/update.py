"""Update group command for ssoadm."""

from typing import Optional

import typer
from botocore.exceptions import (
    BotoCoreError,
    ClientError,
    ConnectionError,
    EndpointConnectionError,
    HTTPClientError,
    NoCredentialsError,
)
from rich.markup import escape

from ...directory import workflow
from ...directory.models import GroupChangeSet
from ...exceptions import DirectoryError
from ...utils.error_handler import (
    handle_aws_error,
    handle_directory_error,
    handle_network_error,
    handle_unexpected_error,
)
from ...utils.validators import validate_group_description, validate_non_empty
from ..common import console, get_directory_client, profile_option


def update_group(
    group_name: str = typer.Argument(..., help="Name of the group to update"),
    description: Optional[str] = typer.Option(
        None, "--description", "-d", help="New description for the group"
    ),
    add: Optional[str] = typer.Option(None, "--add", "-a", help="User or group to add to the group"),
    remove: Optional[str] = typer.Option(
        None, "--remove", "-r", help="User or group to remove from the group"
    ),
    group: bool = typer.Option(
        False,
        "--group",
        "-g",
        help="Look up the --add/--remove member as a group (Identity Store groups only hold users)",
    ),
    profile: Optional[str] = profile_option(),
) -> None:
    """
    Update a group's description and membership.

    Changes are applied in order: description, then the member to add, then
    the member to remove. The first failure stops the update; changes that
    were already applied are kept.

    Examples:
        # Update the group description
        $ ssoadm group update Developers -d "Software development team"

        # Add a user to the group
        $ ssoadm group update Developers -a john.doe

        # Remove a user from the group
        $ ssoadm group update Developers -r jane.smith

        # Add and remove in one call
        $ ssoadm group update Developers -a john.doe -r jane.smith

    With -g the --add/--remove names are looked up as groups. AWS Identity
    Store groups can only contain users, so a -g add or remove fails with an
    error before any membership change is sent.
    """
    if not validate_non_empty(group_name, "Group name"):
        raise typer.Exit(1)

    if not validate_group_description(description):
        raise typer.Exit(1)

    changes = GroupChangeSet.from_options(
        description=description, add=add, remove=remove, target_is_group=group
    )

    if changes.is_empty():
        console.print(f"[yellow]No changes requested for group '{escape(group_name)}'.[/yellow]")
        return

    directory = get_directory_client(profile)

    try:
        workflow.update_group(directory, group_name, changes)
    except DirectoryError as e:
        handle_directory_error(e, operation="UpdateGroup")
        raise typer.Exit(1)
    except (ClientError, NoCredentialsError) as e:
        handle_aws_error(e, operation="UpdateGroup")
        raise typer.Exit(1)
    except (ConnectionError, EndpointConnectionError, HTTPClientError) as e:
        handle_network_error(e, operation="UpdateGroup")
        raise typer.Exit(1)
    except BotoCoreError as e:
        handle_aws_error(e, operation="UpdateGroup")
        raise typer.Exit(1)
    except Exception as e:
        handle_unexpected_error(e, operation="UpdateGroup")
        raise typer.Exit(1)

    console.print(f"[green]Group '{escape(group_name)}' updated successfully.[/green]")
    for line in changes.describe():
        console.print(f"  {escape(line)}")
