import logging, os
from datetime import datetime

logger = logging.getLogger("srefs_ui")

_DEFAULT_LOG_DIR = "~/.config/srefs/logs"


def init(log_dir: str | None = None, level: str | None = None) -> None:
    if logger.handlers:
        return
    level_name = (level or os.environ.get("SREFS_LOG_LEVEL") or "INFO").upper()
    logger.setLevel(getattr(logging, level_name, logging.INFO))

    ch = logging.StreamHandler()
    ch.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    logger.addHandler(ch)

    log_dir = os.path.expanduser(log_dir or os.environ.get("SREFS_LOG_DIR") or _DEFAULT_LOG_DIR)
    try:
        os.makedirs(log_dir, exist_ok=True)
        fh = logging.FileHandler(os.path.join(log_dir, f"srefs_ui_{datetime.now():%Y%m%d}.log"))
    except OSError as e:
        logger.warning("File logging disabled (%s): %s", log_dir, e)
    else:
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s"))
        logger.addHandler(fh)

    logger.info("srefs UI logging initialized")
