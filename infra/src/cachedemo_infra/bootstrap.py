"""Loading of the EC2 bootstrap (user data) script."""

from __future__ import annotations

import logging
from pathlib import Path

logger: logging.Logger = logging.getLogger(__name__)


class BootstrapScriptError(FileNotFoundError):
    """Raised when the bootstrap script cannot be read."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Bootstrap script not found or unreadable: {path}")
        self.path: Path = path


def load_user_data(path: str | Path) -> str:
    """Return the bootstrap script at ``path`` verbatim.

    Raises:
        BootstrapScriptError: The file does not exist or cannot be read.
    """
    script_path = Path(path)
    try:
        script = script_path.read_text(encoding="utf-8")
    except OSError as exc:
        logger.error("user_data_unreadable", extra={"path": str(script_path)})
        raise BootstrapScriptError(script_path) from exc
    logger.debug("user_data_loaded", extra={"path": str(script_path), "bytes": len(script)})
    return script
