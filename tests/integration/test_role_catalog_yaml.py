"""
Integration tests for loading role catalogs from YAML with OmegaConf.
"""

from pathlib import Path

import pytest

from talentscan.contexts.analysis import analyze
from talentscan.contexts.analysis.exceptions import RoleCatalogError
from talentscan.contexts.analysis.roles import DEFAULT_CATALOG, load_role_catalog

REPO_ROOT = Path(__file__).resolve().parents[2]
SHIPPED_CATALOG = REPO_ROOT / "configs" / "roles.yaml"


def _write(tmp_path, content: str) -> Path:
    path = tmp_path / "roles.yaml"
    path.write_text(content)
    return path


@pytest.mark.integration
def test_load_shipped_catalog():
    catalog = load_role_catalog(SHIPPED_CATALOG)
    assert catalog.default.id == "frontend"
    assert "backend" in catalog
    assert catalog.get("devops-engineer").technical_keywords[:2] == ("Terraform", "Ansible")
    assert catalog.config_path == SHIPPED_CATALOG


@pytest.mark.integration
def test_analyze_with_loaded_catalog(tmp_path):
    path = _write(
        tmp_path,
        """
roles:
  - id: backend
    title: Backend Developer
    keywords: [Python, Django, Redis, Docker]
    soft_skills: [Ownership, Mentoring]
    min_years: 4
""",
    )
    catalog = load_role_catalog(path)
    result = analyze("Jane Doe\n2 years of Python and Docker. Ownership.", "backend", catalog=catalog)

    assert result.role_title == "Backend Developer"
    assert [s.name for s in result.skills] == ["Python", "Docker", "Ownership"]
    assert result.experience.relevance == 50
    # floor(50 * 0.5 + 50 * 0.3 + 50 * 0.2)
    assert result.overall_score == 50

    # Unknown ids fall back to the loaded catalog's first role
    assert analyze("", "frontend", catalog=catalog).role_title == "Backend Developer"


@pytest.mark.integration
def test_no_path_and_no_env_returns_builtin(monkeypatch):
    monkeypatch.setattr("talentscan.contexts.analysis.roles.ROLE_CATALOG_PATH", None)
    assert load_role_catalog() is DEFAULT_CATALOG


@pytest.mark.integration
def test_env_path_is_used(monkeypatch):
    monkeypatch.setattr("talentscan.contexts.analysis.roles.ROLE_CATALOG_PATH", str(SHIPPED_CATALOG))
    assert "backend" in load_role_catalog()


@pytest.mark.integration
def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_role_catalog(tmp_path / "missing.yaml")


@pytest.mark.integration
def test_missing_roles_key(tmp_path):
    path = _write(tmp_path, "jobs: []\n")
    with pytest.raises(RoleCatalogError, match="'roles' list"):
        load_role_catalog(path)


@pytest.mark.integration
def test_zero_min_years_rejected_at_load(tmp_path):
    path = _write(
        tmp_path,
        """
roles:
  - id: intern
    title: Intern
    keywords: [Python]
    soft_skills: [Curiosity]
    min_years: 0
""",
    )
    with pytest.raises(RoleCatalogError) as exc_info:
        load_role_catalog(path)
    assert exc_info.value.role_id == "intern"
    assert exc_info.value.config_path == path
    assert str(path) in str(exc_info.value)


@pytest.mark.integration
def test_empty_keywords_rejected_at_load(tmp_path):
    path = _write(
        tmp_path,
        """
roles:
  - id: intern
    title: Intern
    keywords: []
    soft_skills: [Curiosity]
    min_years: 1
""",
    )
    with pytest.raises(RoleCatalogError, match="technical keyword"):
        load_role_catalog(path)
