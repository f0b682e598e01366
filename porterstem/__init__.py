"""
This package reduces English words to their stems with the Porter stemming algorithm,
as a normalization step for text search and indexing pipelines.

"""

__version__ = "1.0.0.dev0"

import logging

from porterstem import parsing, utils  # noqa:F401
from porterstem.parsing.porter import PorterStemmer, stem  # noqa:F401

logger = logging.getLogger("porterstem")
if not logger.handlers:  # To ensure reload() doesn't add another one
    logger.addHandler(logging.NullHandler())
