"""src/urikit/logs.py

Package logger for Urikit.
"""

import logging

logger = logging.getLogger("urikit")
logger.addHandler(logging.NullHandler())
