"""File-based debug logging setup."""

from __future__ import annotations

import logging
import os
from pathlib import Path

LOG_FILENAME = 'cb_debug.log'


def setup_file_logging(output_dir: Path, level: str = 'DEBUG') -> Path:
    """Configure file-based logging for the ``cb`` logger tree. Safe to call twice."""
    output_dir.mkdir(parents=True, exist_ok=True)
    log_path = output_dir / LOG_FILENAME
    root = logging.getLogger('cb')
    root.setLevel(level.upper())
    for existing in root.handlers:
        if isinstance(existing, logging.FileHandler) and existing.baseFilename == os.path.abspath(log_path):
            return log_path
    handler = logging.FileHandler(log_path, encoding='utf-8')
    handler.setFormatter(logging.Formatter('%(asctime)s %(levelname)s %(message)s'))
    root.addHandler(handler)
    logging.getLogger('cb.cli').info('Debug logging started → %s', log_path)
    return log_path
