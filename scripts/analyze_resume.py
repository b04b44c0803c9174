#!/usr/bin/env python3
"""
Command-line interface for scoring resumes against job roles.

Commands:
    analyze - Analyze a resume text file against a role and print the report
    roles   - List available roles
    sample  - Print the built-in sample resume
    history - List saved analyses
    delete  - Delete a saved analysis by id

Usage:
    python scripts/analyze_resume.py analyze resume.txt --role frontend
    python scripts/analyze_resume.py analyze resume.txt --role data-scientist --history outs/history.json
    python scripts/analyze_resume.py sample > sample.txt
"""

import os
import random
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

from talentscan.contexts.analysis.analyzer import analyze
from talentscan.contexts.analysis.defaults import SAMPLE_RESUME
from talentscan.contexts.analysis.exceptions import RoleCatalogError
from talentscan.contexts.analysis.logger import log_analysis_result, setup_analysis_logger
from talentscan.contexts.analysis.roles import RoleCatalog, load_role_catalog
from talentscan.contexts.reporting.history import AnalysisHistory
from talentscan.contexts.reporting.report import format_analysis_report, report_filename
from talentscan.utils.logger import setup_console_logger
from talentscan.utils.timestamp import format_timestamp, now

load_dotenv()
ANALYSIS_HISTORY_PATH = os.getenv("ANALYSIS_HISTORY_PATH")
LOGS_PATH = os.getenv("LOGS_PATH")

app = typer.Typer(
    add_completion=False,
    help="Score resumes against job-role profiles",
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _load_catalog(roles_config: Optional[Path]) -> RoleCatalog:
    """Load the role catalog, exiting with a message on configuration errors."""
    try:
        return load_role_catalog(roles_config)
    except (FileNotFoundError, RoleCatalogError) as e:
        typer.secho(f"ERROR: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


def _history_path(history: Optional[Path]) -> Optional[Path]:
    if history is not None:
        return history
    return Path(ANALYSIS_HISTORY_PATH) if ANALYSIS_HISTORY_PATH else None


@app.command("analyze")
def analyze_command(
    resume_file: Path = typer.Argument(..., help="Plain-text resume file"),
    role: str = typer.Option(
        "frontend", "--role", "-r", help="Role id (unknown ids use the default role)"
    ),
    roles_config: Optional[Path] = typer.Option(
        None, "--roles-config", help="YAML role catalog (default: ROLE_CATALOG_PATH or built-in)"
    ),
    history: Optional[Path] = typer.Option(
        None, "--history", help="JSON history file to append to (default: ANALYSIS_HISTORY_PATH)"
    ),
    report_dir: Optional[Path] = typer.Option(
        None, "--report-dir", help="Also write the report to this directory"
    ),
    log_dir: Optional[Path] = typer.Option(
        None, "--log-dir", help="Write a detailed log here (default: LOGS_PATH/analyze_<timestamp>)"
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for proficiency values"),
):
    """
    Analyze a resume against a role and print the report.

    Examples:\n

        $ analyze_resume.py analyze resume.txt --role ux-designer

        $ analyze_resume.py analyze resume.txt --history outs/history.json --seed 7
    """
    if not resume_file.exists():
        typer.secho(f"ERROR: File not found: {resume_file}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    try:
        text = resume_file.read_text(encoding="utf-8")
    except UnicodeDecodeError:
        typer.secho(
            f"ERROR: Resume is not UTF-8 text: {resume_file}", fg=typer.colors.RED, err=True
        )
        raise typer.Exit(code=1)

    if not text.strip():
        typer.secho(f"ERROR: Resume is empty: {resume_file}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    if log_dir is None and LOGS_PATH:
        log_dir = Path(LOGS_PATH) / f"analyze_{now().strftime('%Y%m%d_%H%M%S')}"
    if log_dir is not None:
        setup_analysis_logger(log_dir, role_id=role)
    else:
        setup_console_logger()

    catalog = _load_catalog(roles_config)
    if role not in catalog:
        typer.secho(
            f"Unknown role '{role}', using '{catalog.default.id}'", fg=typer.colors.YELLOW, err=True
        )

    rng = random.Random(seed) if seed is not None else None
    result = analyze(text, role, catalog=catalog, rng=rng)
    log_analysis_result(result)

    report = format_analysis_report(result)
    typer.echo(report)

    if report_dir is not None:
        report_dir.mkdir(parents=True, exist_ok=True)
        report_path = report_dir / report_filename(result)
        report_path.write_text(report + "\n", encoding="utf-8")
        typer.secho(f"Report written to {report_path}", fg=typer.colors.GREEN, err=True)

    history_path = _history_path(history)
    if history_path is not None:
        saved = AnalysisHistory.load(history_path)
        saved.add(result)
        saved.save(history_path)
        typer.secho(
            f"Saved to history ({len(saved)}/{saved.limit}): {result.id}",
            fg=typer.colors.GREEN,
            err=True,
        )


@app.command("roles")
def roles_command(
    roles_config: Optional[Path] = typer.Option(None, "--roles-config", help="YAML role catalog"),
):
    """List available roles (the first one is the default)."""
    catalog = _load_catalog(roles_config)
    for profile in catalog:
        marker = " (default)" if profile.id == catalog.default.id else ""
        typer.echo(f"{profile.id:<20} {profile.title}{marker}")
        typer.echo(f"{'':<20} min years: {profile.minimum_years}")
        typer.echo(f"{'':<20} keywords: {', '.join(profile.technical_keywords)}")
        typer.echo(f"{'':<20} soft skills: {', '.join(profile.soft_skill_keywords)}")


@app.command("sample")
def sample_command():
    """Print the built-in sample resume."""
    typer.echo(SAMPLE_RESUME)


@app.command("history")
def history_command(
    history: Optional[Path] = typer.Option(None, "--history", help="JSON history file"),
    show: Optional[str] = typer.Option(None, "--show", help="Print the full report for this id"),
):
    """List saved analyses, newest first."""
    history_path = _history_path(history)
    if history_path is None:
        typer.secho("ERROR: No history file (use --history)", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    saved = AnalysisHistory.load(history_path)

    if show is not None:
        result = saved.get(show)
        if result is None:
            typer.secho(f"ERROR: No analysis with id {show}", fg=typer.colors.RED, err=True)
            raise typer.Exit(code=1)
        typer.echo(format_analysis_report(result))
        return

    if not len(saved):
        typer.echo("No saved analyses.")
        return

    for result in saved:
        when = format_timestamp(result.created_at.isoformat(), relative=True)
        typer.echo(
            f"{result.id}  {result.overall_score:>3}%  {result.candidate_name} "
            f"({result.role_title}, {when})"
        )


@app.command("delete")
def delete_command(
    result_id: str = typer.Argument(..., help="Analysis id"),
    history: Optional[Path] = typer.Option(None, "--history", help="JSON history file"),
):
    """Delete a saved analysis by id."""
    history_path = _history_path(history)
    if history_path is None:
        typer.secho("ERROR: No history file (use --history)", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    saved = AnalysisHistory.load(history_path)
    if not saved.remove(result_id):
        typer.secho(f"ERROR: No analysis with id {result_id}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    saved.save(history_path)
    typer.secho(f"Deleted {result_id}", fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()
