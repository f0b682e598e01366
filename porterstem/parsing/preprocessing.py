#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# Licensed under the GNU LGPL v2.1 - https://www.gnu.org/licenses/old-licenses/lgpl-2.1.en.html

"""This module contains methods for parsing and preprocessing strings before they are indexed.

Examples
--------

.. sourcecode:: pycon

    >>> from porterstem.parsing.preprocessing import preprocess_string, stem_text
    >>> stem_text("Relational databases")
    'relat databas'
    >>>
    >>> preprocess_string("Th3 ponies, motoring 2day!")
    ['poni', 'motor', 'dai']

"""

import logging
import re
import string

from porterstem import utils
from porterstem.parsing.porter import PorterStemmer

logger = logging.getLogger(__name__)

#: tokens shorter than this are dropped by :func:`strip_short`
MIN_WORD_LENGTH = 3

RE_PUNCT = re.compile(r'([%s])+' % re.escape(string.punctuation), re.UNICODE)
RE_NUMERIC = re.compile(r"[0-9]+", re.UNICODE)
RE_WHITESPACE = re.compile(r"(\s)+", re.UNICODE)


def strip_punctuation(s):
    """Replace ASCII punctuation characters with spaces in `s` using :const:`RE_PUNCT`.

    Parameters
    ----------
    s : str

    Returns
    -------
    str
        Unicode string without punctuation characters.

    Examples
    --------
    .. sourcecode:: pycon

        >>> from porterstem.parsing.preprocessing import strip_punctuation
        >>> strip_punctuation("A semicolon is a stronger break than a comma, but not as much as a full stop!")
        'A semicolon is a stronger break than a comma  but not as much as a full stop '

    """
    s = utils.to_unicode(s)
    return RE_PUNCT.sub(" ", s)


def strip_numeric(s):
    """Remove digits from `s` using :const:`RE_NUMERIC`.

    Examples
    --------
    .. sourcecode:: pycon

        >>> from porterstem.parsing.preprocessing import strip_numeric
        >>> strip_numeric("0text24porter365test")
        'textportertest'

    """
    s = utils.to_unicode(s)
    return RE_NUMERIC.sub("", s)


def strip_multiple_whitespaces(s):
    r"""Collapse runs of whitespace characters (spaces, tabs, line breaks) in `s` into single
    spaces using :const:`RE_WHITESPACE`.

    Examples
    --------
    .. sourcecode:: pycon

        >>> from porterstem.parsing.preprocessing import strip_multiple_whitespaces
        >>> strip_multiple_whitespaces("salut" + '\r' + " les" + '\n' + "         loulous!")
        'salut les loulous!'

    """
    s = utils.to_unicode(s)
    return RE_WHITESPACE.sub(" ", s)


def remove_short_tokens(tokens, minsize=MIN_WORD_LENGTH):
    """Remove tokens shorter than `minsize` chars.

    Parameters
    ----------
    tokens : iterable of str
        Sequence of tokens.
    minsize : int, optional
        Minimal length of token (inclusive).

    Returns
    -------
    list of str
        List of tokens without short tokens.

    """
    return [token for token in tokens if len(token) >= minsize]


def strip_short(s, minsize=MIN_WORD_LENGTH):
    """Remove words with length lesser than `minsize` from `s`.

    Examples
    --------
    .. sourcecode:: pycon

        >>> from porterstem.parsing.preprocessing import strip_short
        >>> strip_short("salut les amis du 59")
        'salut les amis'

    """
    s = utils.to_unicode(s)
    return " ".join(remove_short_tokens(s.split(), minsize))


def stem_text(text):
    """Transform `text` into lowercase and stem every whitespace separated word.

    Parameters
    ----------
    text : str

    Returns
    -------
    str
        Lowercased and porter-stemmed version of `text`.

    """
    text = utils.to_unicode(text)
    return PorterStemmer().stem_sentence(text)


DEFAULT_FILTERS = [
    lambda x: x.lower(), strip_punctuation, strip_multiple_whitespaces,
    strip_numeric, strip_short, stem_text,
]


def preprocess_string(s, filters=DEFAULT_FILTERS):
    """Apply the list of chosen filters to `s` and split the result into tokens.

    Default list of filters:

    * lowercasing,
    * :func:`~porterstem.parsing.preprocessing.strip_punctuation`,
    * :func:`~porterstem.parsing.preprocessing.strip_multiple_whitespaces`,
    * :func:`~porterstem.parsing.preprocessing.strip_numeric`,
    * :func:`~porterstem.parsing.preprocessing.strip_short`,
    * :func:`~porterstem.parsing.preprocessing.stem_text`.

    Parameters
    ----------
    s : str
    filters : list of functions, optional

    Returns
    -------
    list of str
        Processed tokens.

    """
    s = utils.to_unicode(s)
    for f in filters:
        s = f(s)
    return s.split()


def preprocess_documents(docs):
    """Apply :const:`DEFAULT_FILTERS` to the documents strings.

    Parameters
    ----------
    docs : list of str

    Returns
    -------
    list of list of str
        Processed documents split by whitespace.

    """
    return [preprocess_string(d) for d in docs]


def read_words(path):
    """Iterate over the words of a newline delimited word list.

    Parameters
    ----------
    path : str
        Path or URI of the word list; compressed files are decompressed transparently.

    Yields
    ------
    str
        Each non-empty line, stripped of surrounding whitespace.

    """
    num_lines = 0
    with utils.open(path, 'rb') as fin:
        for num_lines, line in enumerate(fin, start=1):
            word = utils.to_unicode(line).strip()
            if word:
                yield word
    logger.debug("read %i lines from %s", num_lines, path)
