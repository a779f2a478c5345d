import logging
import sys
from pathlib import Path
from typing import Optional, Union

_CONFIGURED_FLAG = "_taskboard_configured"


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[Union[str, Path]] = None) -> None:
    """
    Configure the ``taskboard`` logger with:
    - Console handler on stderr
    - File handler (optional) for keeping a full log

    Safe to call more than once; only the first call installs handlers.
    """
    logger = logging.getLogger("taskboard")
    logger.setLevel(level)
    if getattr(logger, _CONFIGURED_FLAG, False):
        return

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_file), encoding="utf-8")
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    setattr(logger, _CONFIGURED_FLAG, True)
