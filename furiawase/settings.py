"""
Settings and configuration for Furiawase.

Values are read from the environment once, at import time.
"""

import os

# Debug mode
DEBUG = os.environ.get("FURIAWASE_DEBUG", "").lower() in ("1", "true", "yes")

# Log level used by the command line interface
LOG_LEVEL = os.environ.get("FURIAWASE_LOG_LEVEL", "DEBUG" if DEBUG else "WARNING").upper()

# Extra arguments passed to the MeCab tagger (e.g. "-d /path/to/unidic")
MECAB_ARGS = os.environ.get("FURIAWASE_MECAB_ARGS", "")

# Degrade to a single whole-word pair when the reading cannot be aligned.
# When disabled, an AlignmentError is raised instead.
ALIGNMENT_FALLBACK = os.environ.get("FURIAWASE_ALIGNMENT_FALLBACK", "1").lower() not in ("0", "false", "no")

# Separators of the placement string format "0-1:きょう;2:び"
PLACEMENT_ENTRY_SEPARATOR = ";"
PLACEMENT_TEXT_SEPARATOR = ":"
PLACEMENT_RANGE_SEPARATOR = "-"
