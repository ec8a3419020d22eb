"""
Constants for the guitar theory server.

No magic strings - request defaults and messages live here.
"""

# Request defaults
DEFAULT_KEY = "C"
DEFAULT_SCALE = "major"

# Environment variable overriding the MIDI output directory
OUTPUT_DIR_ENV = "CHUK_GUITAR_OUTPUT_DIR"


class ErrorMessages:
    """Standardized error messages."""

    PATTERN_NOT_FOUND = "Progression pattern '{pattern}' not found."
