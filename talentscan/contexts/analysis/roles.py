"""
Role Catalog

Read-only table of job-role profiles used as scoring baselines. The built-in
catalog comes from defaults.py; an alternative catalog can be loaded from YAML:

    roles:
      - id: frontend
        title: Frontend Developer
        keywords: [React, TypeScript, CSS]
        soft_skills: [Communication, Teamwork]
        min_years: 3

Catalog entries are validated once, at construction. Scoring relies on that
validation and does not guard its divisions.
"""

import os
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, List, Optional

from dotenv import load_dotenv
from omegaconf import OmegaConf

from talentscan.contexts.analysis.analysis_data_structure import RoleProfile
from talentscan.contexts.analysis.defaults import DEFAULT_ROLE_DEFINITIONS
from talentscan.contexts.analysis.exceptions import RoleCatalogError
from talentscan.contexts.analysis.logger import _log_debug

load_dotenv()
ROLE_CATALOG_PATH = os.getenv("ROLE_CATALOG_PATH")

REQUIRED_FIELDS = ("id", "title", "keywords", "soft_skills", "min_years")


def role_from_config(entry: Dict[str, Any], config_path: Optional[Path] = None) -> RoleProfile:
    """
    Build a RoleProfile from a catalog entry dict (built-in or YAML).

    Args:
        entry: Dict with id, title, keywords, soft_skills, min_years
        config_path: Source file, for error messages

    Returns:
        Validated RoleProfile

    Raises:
        RoleCatalogError: If a field is missing or has the wrong shape
    """
    if not isinstance(entry, dict):
        raise RoleCatalogError(
            f"Role entry must be a mapping, got {type(entry).__name__}", config_path=config_path
        )

    role_id = entry.get("id")
    missing = [name for name in REQUIRED_FIELDS if entry.get(name) is None]
    if missing:
        raise RoleCatalogError(
            f"Role entry missing required fields: {missing}",
            role_id=role_id,
            config_path=config_path,
        )

    for list_field in ("keywords", "soft_skills"):
        if isinstance(entry[list_field], str) or not isinstance(entry[list_field], (list, tuple)):
            raise RoleCatalogError(
                f"'{list_field}' must be a list of strings",
                role_id=role_id,
                config_path=config_path,
            )

    min_years = entry["min_years"]
    if isinstance(min_years, bool) or not isinstance(min_years, int):
        raise RoleCatalogError(
            f"'min_years' must be an integer, got {min_years!r}",
            role_id=role_id,
            config_path=config_path,
        )

    profile = RoleProfile(
        id=str(role_id),
        title=str(entry["title"]),
        technical_keywords=tuple(str(k) for k in entry["keywords"]),
        soft_skill_keywords=tuple(str(k) for k in entry["soft_skills"]),
        minimum_years=min_years,
    )
    validate_role(profile, config_path)
    return profile


def validate_role(profile: RoleProfile, config_path: Optional[Path] = None) -> None:
    """
    Check the invariants scoring depends on.

    Raises:
        RoleCatalogError: If a keyword list is empty, a keyword is blank,
            or minimum_years is below 1
    """
    if not profile.id:
        raise RoleCatalogError("Role id must not be empty", config_path=config_path)
    if not profile.technical_keywords:
        raise RoleCatalogError(
            "Role needs at least one technical keyword", role_id=profile.id, config_path=config_path
        )
    if not profile.soft_skill_keywords:
        raise RoleCatalogError(
            "Role needs at least one soft skill keyword",
            role_id=profile.id,
            config_path=config_path,
        )
    blank = [k for k in profile.technical_keywords + profile.soft_skill_keywords if not k.strip()]
    if blank:
        raise RoleCatalogError(
            "Role keywords must not be blank", role_id=profile.id, config_path=config_path
        )
    if profile.minimum_years < 1:
        raise RoleCatalogError(
            f"'min_years' must be at least 1, got {profile.minimum_years}",
            role_id=profile.id,
            config_path=config_path,
        )


class RoleCatalog:
    """
    Ordered, read-only mapping of role id to RoleProfile.

    The first role is the default: resolve() falls back to it for any id the
    catalog does not contain, so analysis never fails on a role id.
    """

    def __init__(self, roles: Iterable[RoleProfile], config_path: Optional[Path] = None):
        """
        Args:
            roles: Role profiles in catalog order
            config_path: Source YAML file, if the catalog was loaded from one

        Raises:
            RoleCatalogError: If the catalog is empty, has duplicate ids,
                or contains an invalid role
        """
        self.config_path = config_path
        roles_by_id: Dict[str, RoleProfile] = {}

        for profile in roles:
            validate_role(profile, config_path)
            if profile.id in roles_by_id:
                raise RoleCatalogError(
                    "Duplicate role id", role_id=profile.id, config_path=config_path
                )
            roles_by_id[profile.id] = profile

        if not roles_by_id:
            raise RoleCatalogError("Role catalog is empty", config_path=config_path)

        self._roles = MappingProxyType(roles_by_id)

    @classmethod
    def from_definitions(
        cls, definitions: Iterable[Dict[str, Any]], config_path: Optional[Path] = None
    ) -> "RoleCatalog":
        """Build a catalog from entry dicts (see role_from_config)."""
        return cls(
            [role_from_config(entry, config_path) for entry in definitions],
            config_path=config_path,
        )

    @property
    def default(self) -> RoleProfile:
        """First role in catalog order."""
        return next(iter(self._roles.values()))

    def get(self, role_id: str) -> Optional[RoleProfile]:
        return self._roles.get(role_id)

    def resolve(self, role_id: str) -> RoleProfile:
        """
        Look up a role, falling back to the default role for unknown ids.

        Args:
            role_id: Any string

        Returns:
            Matching RoleProfile, or the catalog's first role
        """
        profile = self._roles.get(role_id)
        if profile is None:
            _log_debug(f"Unknown role id {role_id!r}, using default role {self.default.id!r}")
            return self.default
        return profile

    def ids(self) -> List[str]:
        return list(self._roles.keys())

    def __contains__(self, role_id: object) -> bool:
        return role_id in self._roles

    def __iter__(self) -> Iterator[RoleProfile]:
        return iter(self._roles.values())

    def __len__(self) -> int:
        return len(self._roles)


DEFAULT_CATALOG = RoleCatalog.from_definitions(DEFAULT_ROLE_DEFINITIONS)


def load_role_catalog(config_path: Path = None) -> RoleCatalog:
    """
    Load a role catalog from a YAML file.

    Args:
        config_path: Optional path to a roles YAML file (defaults to ROLE_CATALOG_PATH
            env variable; the built-in catalog is returned when neither is set)

    Returns:
        RoleCatalog

    Raises:
        FileNotFoundError: If the config file doesn't exist
        RoleCatalogError: If the file has no 'roles' list or an entry is invalid
    """
    if config_path is None:
        if not ROLE_CATALOG_PATH:
            return DEFAULT_CATALOG
        config_path = ROLE_CATALOG_PATH

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Role catalog not found at {config_path}")

    config = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)
    if not isinstance(config, dict) or not isinstance(config.get("roles"), list):
        raise RoleCatalogError("Catalog must contain a 'roles' list", config_path=config_path)

    catalog = RoleCatalog.from_definitions(config["roles"], config_path=config_path)
    _log_debug(f"Loaded {len(catalog)} roles from {config_path}")
    return catalog


def resolve_role(role_id: str, catalog: Optional[RoleCatalog] = None) -> RoleProfile:
    """Resolve a role id against a catalog (default: built-in), never failing."""
    return (catalog if catalog is not None else DEFAULT_CATALOG).resolve(role_id)


def list_roles(catalog: Optional[RoleCatalog] = None) -> List[RoleProfile]:
    """Roles in catalog order."""
    return list(catalog if catalog is not None else DEFAULT_CATALOG)
