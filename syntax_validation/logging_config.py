"""
Logging setup shared by the CLI and the API.
"""

import logging

from pythonjsonlogger import jsonlogger

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "INFO", fmt: str = "text") -> None:
    """
    Configure root logging.

    Args:
        level: Logging level name
        fmt: "text" for plain lines, "json" for one JSON object per record
    """
    handler = logging.StreamHandler()

    if fmt == "json":
        handler.setFormatter(jsonlogger.JsonFormatter("%(asctime)s %(name)s %(levelname)s %(message)s"))
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    logging.basicConfig(level=getattr(logging, level.upper()), handlers=[handler], force=True)
