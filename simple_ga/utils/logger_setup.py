from datetime import datetime, timezone
from pathlib import Path
import sys

from loguru import logger

LOG_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <7}</level> | "
    "<cyan>{name}</cyan> | <level>{message}</level>"
)


def setup_logger(
    log_dir: str = "logs",
    level: str = "INFO",
    rotation: str = "50 MB",
    retention: str = "30 days",
) -> str:
    """Route loguru to stderr and to a per-run file under *log_dir*.

    stdout stays free for the run's result. Colour markup is kept only when
    stderr is a terminal; the file always gets plain text.
    """
    started = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
    log_file = Path(log_dir) / f"simple_ga_{started}.log"
    log_file.parent.mkdir(parents=True, exist_ok=True)

    logger.remove()
    logger.add(sys.stderr, level=level, format=LOG_FORMAT)
    logger.add(
        log_file,
        level=level,
        format=LOG_FORMAT,
        rotation=rotation,
        retention=retention,
        encoding="utf-8",
    )
    logger.debug("Logging at {} to {}", level, log_file)
    return str(log_file)
