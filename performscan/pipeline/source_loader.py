import logging
from pathlib import Path

from performscan.core.config import settings

logger = logging.getLogger(__name__)

class SourceReadError(Exception):
    """The COBOL source file could not be read."""

    def __init__(self, path: Path, reason: str):
        super().__init__(reason)
        self.path = path
        self.reason = reason

def read_source(file_path) -> str:
    """
    Reads a COBOL source file and returns its full text.
    The path is resolved to an absolute path first.
    """
    path = Path(file_path).resolve()
    logger.info(f"Reading COBOL source: {path}")
    try:
        with open(path, 'r', encoding=settings.SOURCE_ENCODING, errors='replace') as f:
            return f.read()
    except OSError as e:
        reason = e.strerror or str(e)
        raise SourceReadError(path, f"{reason}: '{path}'") from e
