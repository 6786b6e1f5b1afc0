"""Package logger.

Library modules only emit records; configuring handlers is left to the
application (the ``pyrlc`` CLI calls ``logging.basicConfig``).
"""

import logging

logger = logging.getLogger("pyrlc")
logger.addHandler(logging.NullHandler())
