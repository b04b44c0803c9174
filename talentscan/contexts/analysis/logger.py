"""
Analysis context logger.

Provides logging interface for analysis context with automatic [analysis] prefix.
All analysis modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from talentscan.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[analysis]"


def setup_analysis_logger(log_dir: Path, role_id: str = None, console: bool = True) -> Path:
    """
    Setup logger for analysis context.

    Args:
        log_dir: Directory for this analysis session
        role_id: Requested role id, recorded in the provenance header
        console: Also log INFO and above to the console

    Returns:
        Path to log file

    Example:
        from talentscan.contexts.analysis.logger import setup_analysis_logger, _log_info

        log_file = setup_analysis_logger(log_dir, role_id="frontend")
        _log_info("Starting analysis...")
    """
    return _setup_logger(
        context_name="analysis",
        log_dir=log_dir,
        extra_provenance={"Role": role_id},
        console=console,
    )


# Wrapper functions with automatic [analysis] prefix


def _log_info(message: str) -> None:
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level analysis-specific logging helpers


def log_analysis_result(result) -> None:
    """
    Log a finished analysis at INFO level, details at DEBUG.

    Args:
        result: AnalysisResult from analyze()
    """
    _log_success(f"{result.candidate_name} vs {result.role_title}: {result.overall_score}%")
    _log_info(
        f"Breakdown: skills={result.breakdown.skills} "
        f"experience={result.breakdown.experience} education={result.breakdown.education}"
    )
    _log_debug(f"  Analysis id: {result.id}")
    _log_debug(f"  Skills: {', '.join(s.name for s in result.skills) or 'none'}")
    _log_debug(f"  Years: {result.experience.years} (relevance {result.experience.relevance}%)")
    _log_debug(f"  Degrees: {', '.join(result.education.degrees) or 'none'}")
    _log_debug(f"  Certifications: {', '.join(result.education.certifications) or 'none'}")
