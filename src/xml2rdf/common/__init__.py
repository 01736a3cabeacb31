"""
Common utilities for xml2rdf.
"""

import logging
import sys
from typing import Optional

from .errors import (
    Xml2RdfError, InputOpenError, SinkWriteError, MalformedXmlError, UnknownSinkError
)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level=logging.WARNING, log_file: Optional[str] = None):
    # Get the root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Check if the root logger already has handlers (avoid adding multiple)
    if not root_logger.handlers:
        if log_file:
            handler = logging.FileHandler(log_file)
        else:
            handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root_logger.addHandler(handler)


__all__ = [
    "setup_logging", "LOG_FORMAT",
    "Xml2RdfError", "InputOpenError", "SinkWriteError", "MalformedXmlError", "UnknownSinkError",
]
