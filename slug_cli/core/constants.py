"""Static constants for slug generation."""

from __future__ import annotations

import string

DEFAULT_SEPARATOR = "-"
DEFAULT_RANDOMNESS_LENGTH = 6

# Suffix characters stay inside the token alphabet so a suffixed slug is still a valid slug.
RANDOM_ALPHABET = string.ascii_lowercase + string.digits

CASE_CHOICES = ("lower", "upper", "same")

BATCH_OUTPUT_FORMATS = ("json", "csv")
