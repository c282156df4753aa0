"""
High score persistence.

The score lives in a plain text file holding one decimal integer. Reads
and writes never raise: a missing or unreadable file counts as 0 and a
failed write is dropped after a warning.
"""

import logging
import os
import re
from typing import Optional

from domain.constants import DEFAULT_HIGH_SCORE_FILE

logger = logging.getLogger(__name__)


def load_high_score(path: str = DEFAULT_HIGH_SCORE_FILE) -> int:
    """
    Read the high score from `path`.

    Returns 0 if the file is missing, empty, unreadable or does not start
    with a non-negative integer.
    """
    if not os.path.exists(path):
        return 0

    try:
        with open(path, 'r') as f:
            first_line = f.readline()
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Could not read high score from {path}: {e}")
        return 0

    text = first_line.strip()
    # Plain optional sign and digits only; int() would also take "1_000"
    if not re.fullmatch(r"[+-]?\d+", text):
        logger.warning(f"Ignoring unparsable high score in {path}: {text!r}")
        return 0

    value = int(text)
    return value if value >= 0 else 0


def save_high_score(value: int, path: str = DEFAULT_HIGH_SCORE_FILE) -> bool:
    """
    Overwrite `path` with `value` as decimal text.

    Returns True on success. Failures are logged and otherwise ignored.
    """
    try:
        with open(path, 'w') as f:
            f.write(str(int(value)))
    except OSError as e:
        logger.warning(f"Could not save high score to {path}: {e}")
        return False

    logger.info(f"Saved high score {value} to {path}")
    return True


class HighScoreStore:
    """Binds the load/save helpers to one file path."""

    def __init__(self, path: Optional[str] = None):
        self.path = path or DEFAULT_HIGH_SCORE_FILE

    def load(self) -> int:
        return load_high_score(self.path)

    def save(self, value: int) -> bool:
        return save_high_score(value, self.path)

    def __repr__(self):
        return f"<HighScoreStore path={self.path!r}>"
