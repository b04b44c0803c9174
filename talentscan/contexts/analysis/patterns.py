"""
Reusable patterns and vocabularies for resume text extraction.

Pattern classes follow a single convention:
- Dataclasses with frozen=True for immutability
- Class-level constants for patterns
- Module-level tuples for ordered vocabularies
"""

import re
from dataclasses import dataclass

# =============================================================================
# EXPERIENCE PATTERNS
# =============================================================================


@dataclass(frozen=True)
class ExperiencePatterns:
    """
    Regex patterns for inferring years of experience.

    YEARS_PHRASE is the primary signal ("4 years of experience", "1 year").
    DATE_RANGE is only consulted when no phrase matches ("2019 - 2021",
    "2021 - Present"). Neither enforces word boundaries.
    """

    # <integer> year / <integer> years
    YEARS_PHRASE: re.Pattern = re.compile(r"(\d+)\s+years?", re.IGNORECASE | re.ASCII)

    # <4-digit year> - <4-digit year | Present>
    DATE_RANGE: re.Pattern = re.compile(r"\d{4}\s*-\s*(?:\d{4}|Present)", re.IGNORECASE | re.ASCII)


# Each listed date range is assumed to span about two years
YEARS_PER_DATE_RANGE = 2

# Stated years longer than this saturate, keeping int() and str() within
# the interpreter's digit limit
MAX_YEARS_DIGITS = 600
MAX_STATED_YEARS = 10**MAX_YEARS_DIGITS - 1


# =============================================================================
# EDUCATION VOCABULARIES
# =============================================================================

# Matched case-sensitively against the raw text, in this order
DEGREE_TOKENS = ("B.S.", "M.S.", "Ph.D.", "Bachelor", "Master", "Degree")

CERTIFICATION_TOKENS = ("AWS", "Google", "Certified", "Certificate")

# Matched case-insensitively; drives the certification recommendation
CERTIFICATION_MENTION = "certification"
