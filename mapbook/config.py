import os
import logging
from dotenv import load_dotenv
from pathlib import Path

root_dir = Path(__file__).resolve().parent.parent
env_path = root_dir / ".env"

load_dotenv(env_path)

class Config:
    OUTPUT_DIR_FIGURES = Path(os.getenv("MAPBOOK_OUTPUT_DIR", "./outputs/figures"))
    FIGURE_DPI = int(os.getenv("MAPBOOK_FIGURE_DPI", "300"))

    DEFAULT_CRS = os.getenv("MAPBOOK_DEFAULT_CRS", "EPSG:4326")
    LOG_LEVEL = os.getenv("MAPBOOK_LOG_LEVEL", "WARNING")

    @classmethod
    def initialize_folders(cls):
        cls.OUTPUT_DIR_FIGURES.mkdir(parents=True, exist_ok=True)


def setup_logging(level=None):
    """Console logging for scripts and notebooks. Library modules only create loggers."""
    level = level or Config.LOG_LEVEL
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S"
    )
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = [console_handler]

    # Plotting stack is chatty at DEBUG
    for noisy in ("matplotlib", "PIL", "urllib3", "fiona", "pyogrio"):
        logging.getLogger(noisy).setLevel(logging.WARNING)
