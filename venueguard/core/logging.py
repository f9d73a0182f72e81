import logging
from typing import Union
from fastapi.logger import logger as fastapi_logger


def setup_logging(level: Union[int, str] = logging.INFO):
    # Configure logging format
    logging_format = "%(asctime)s - %(levelname)s - %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):  # Unknown level names come back as strings
            level = logging.INFO

    # Configure root logger
    logging.basicConfig(
        level=level,
        format=logging_format,
        datefmt=date_format
    )

    # Configure FastAPI logger
    fastapi_logger.handlers = logging.getLogger("uvicorn").handlers
    fastapi_logger.setLevel(level)
