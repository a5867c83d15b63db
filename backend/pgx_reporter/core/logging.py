"""
Logging setup for the reporter service.
Importing this module configures the root logger once.
"""

import logging
import os
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Optional[str] = None):
    level = level or os.getenv("PGX_REPORTER_LOG_LEVEL", "INFO")
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


configure_logging()
