import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(mcpreg_home: Path | None = None) -> None:
    """Configure unified mcpreg logging.

    Logs go to a rotating file only. Stdout carries the MCP transport and
    must never receive log lines.

    Args:
        mcpreg_home: Path to mcpreg home directory. If None, derived from environment.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if mcpreg_home is None:
        from mcpreg.api.config.get_home_dir import get_home_dir

        mcpreg_home = get_home_dir()

    # Ensure directory exists
    mcpreg_home.mkdir(parents=True, exist_ok=True)
    log_file = mcpreg_home / "mcpreg.log"

    root_logger = logging.getLogger("mcpreg")
    root_logger.setLevel(logging.INFO)
    root_logger.propagate = False

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
        encoding="utf-8",
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    # requests/urllib3 chatter is not useful in the log
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    _CONFIGURED = True
