"""This package contains the Porter stemmer and functions to preprocess raw text"""

from .porter import PorterStemmer, stem, stem_words  # noqa:F401
from .preprocessing import (  # noqa:F401
    preprocess_documents,
    preprocess_string,
    read_words,
    remove_short_tokens,
    stem_text,
    strip_multiple_whitespaces,
    strip_numeric,
    strip_punctuation,
    strip_short,
)
