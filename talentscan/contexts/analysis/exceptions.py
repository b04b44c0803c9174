"""Custom exceptions for the analysis context."""

from pathlib import Path
from typing import Optional


class RoleCatalogError(ValueError):
    """
    Exception raised when a role catalog entry is malformed.

    A malformed catalog is a configuration-time defect: every role needs non-empty
    keyword lists (they are scoring denominators) and a minimum of at least one year
    (relevance is normalized against it).

    Attributes:
        message: Error description
        role_id: Identifier of the offending role, if known
        config_path: Path to the YAML catalog the role came from, if any
    """

    def __init__(
        self,
        message: str,
        role_id: Optional[str] = None,
        config_path: Optional[Path] = None,
    ):
        self.message = message
        self.role_id = role_id
        self.config_path = config_path

        parts = [message]

        if role_id:
            parts.append(f"Role: {role_id}")

        if config_path:
            parts.append(f"Catalog: {config_path}")

        super().__init__("\n".join(parts))
