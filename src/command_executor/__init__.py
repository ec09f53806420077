"""Cross-platform command executor with plain and base64 execution strategies."""

import logging

__version__ = "1.0.0"

# silent until the entry point attaches a handler with create_logger
logging.getLogger(__name__).addHandler(logging.NullHandler())
