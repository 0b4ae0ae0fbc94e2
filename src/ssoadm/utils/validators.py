"""Input validation utilities for ssoadm."""

import re
from typing import Optional

from rich.console import Console

console = Console()

# Identity Store limits
MAX_GROUP_DESCRIPTION_LENGTH = 1024
IDENTITY_STORE_ID_PATTERN = r"^d-[0-9a-f]{10}$|^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$"


def validate_non_empty(value: Optional[str], field_name: str) -> bool:
    """
    Validate that a value is not empty.

    Args:
        value: The value to validate
        field_name: The name of the field for error messages

    Returns:
        True if the value is not empty, False otherwise
    """
    if not value or value.strip() == "":
        console.print(f"[red]Error: {field_name} cannot be empty.[/red]")
        return False

    return True


def validate_group_description(description: Optional[str]) -> bool:
    """
    Validate a group description.

    Args:
        description: The group description to validate

    Returns:
        True if the description is valid, False otherwise
    """
    if description is None:
        return True  # Description is optional

    if len(description) > MAX_GROUP_DESCRIPTION_LENGTH:
        console.print(
            f"[red]Error: Group description cannot exceed {MAX_GROUP_DESCRIPTION_LENGTH} characters.[/red]"
        )
        return False

    return True


def validate_identity_store_id(identity_store_id: Optional[str]) -> bool:
    """
    Validate an Identity Store ID such as "d-1234567890".

    Args:
        identity_store_id: The ID to validate

    Returns:
        True if the ID is valid, False otherwise
    """
    if not identity_store_id or not re.match(IDENTITY_STORE_ID_PATTERN, identity_store_id):
        console.print(f"[red]Error: '{identity_store_id}' is not a valid Identity Store ID.[/red]")
        console.print("[yellow]Identity Store IDs look like 'd-1234567890'.[/yellow]")
        return False

    return True
