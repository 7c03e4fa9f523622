"""Run options and logging setup."""

import logging
from typing import Optional

from pydantic import BaseModel, ConfigDict

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
LOG_DATEFMT = "%H:%M:%S"


class RunOptions(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    path: str
    verbose: bool = False
    log_file: Optional[str] = None


def setup_logging(verbose: bool, log_file: Optional[str] = None) -> None:
    # Reports go to stdout; keep stderr quiet unless asked.
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)
    if log_file:
        fh = logging.FileHandler(log_file, mode="w")
        fh.setLevel(level)
        fh.setFormatter(logging.Formatter(LOG_FORMAT, LOG_DATEFMT))
        logging.getLogger().addHandler(fh)
