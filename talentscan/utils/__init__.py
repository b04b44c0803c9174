"""
Shared utilities for TalentScan.

Common functionality used across contexts:
- Logger setup
- Timestamps
- Text table formatting
"""

from talentscan.utils.timestamp import format_timestamp, now

__all__ = ["format_timestamp", "now"]
