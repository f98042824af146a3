# utils/logger.py
import logging
import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

# Same GYM_ prefix as AppConfig
LOG_DIR = Path(os.getenv("GYM_LOG_DIR", "logs"))
LOG_DIR.mkdir(parents=True, exist_ok=True)

LOG_LEVEL = os.getenv("GYM_LOG_LEVEL", "INFO").upper()
LOG_FILE = Path(os.getenv("GYM_LOG_FILE", LOG_DIR / "gym_traffic.log"))

ROOT_LOGGER = "gym_traffic"

formatter = logging.Formatter(
    fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(filename)s:%(lineno)d | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S"
)

# File handler: estimates, series builds, query failures
file_handler = logging.FileHandler(LOG_FILE, encoding="utf-8")
file_handler.setLevel(LOG_LEVEL)
file_handler.setFormatter(formatter)

# Console handler on stderr; warnings only so dashboard text on stdout stays clean
console_handler = logging.StreamHandler()
console_handler.setLevel(logging.WARNING)
console_handler.setFormatter(formatter)


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    """
    Return a logger in the gym_traffic hierarchy.

    Handlers live on the package root logger only; module loggers
    (gym_traffic.traffic.estimator, ...) propagate to it. Names outside
    the hierarchy are nested under it.
    """
    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        # e.g. "__main__" when a CLI module is run with -m
        name = f"{ROOT_LOGGER}.{name}"

    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(LOG_LEVEL)
    if not root.handlers:
        root.addHandler(file_handler)
        root.addHandler(console_handler)

    return logging.getLogger(name)
