import logging
import os
import tempfile

from textual.logging import TextualHandler

from config import settings

def setup_logger() -> logging.Logger:
    logger = logging.getLogger("host_bootstrap")
    logger.setLevel(logging.DEBUG)

    fmt = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )

    # Session transcript; fall back to the temp dir if the log dir is not writable
    try:
        os.makedirs(settings.log_dir, exist_ok=True)
        fh = logging.FileHandler(settings.log_path)
    except OSError:
        fh = logging.FileHandler(os.path.join(tempfile.gettempdir(), settings.log_file))
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(fmt)

    th = TextualHandler()
    th.setLevel(logging.WARNING)
    th.setFormatter(fmt)

    if not logger.handlers:
        logger.addHandler(fh)
        logger.addHandler(th)
    return logger

log = setup_logger()
