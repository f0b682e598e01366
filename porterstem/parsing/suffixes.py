#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# Licensed under the GNU LGPL v2.1 - https://www.gnu.org/licenses/old-licenses/lgpl-2.1.en.html

"""Match and rewrite trailing suffixes.

Words are plain `str` objects, so every rewrite returns a new word and the input is
never modified.

"""

from porterstem.parsing.phonetics import is_vowel


def ends_with(sequence, suffix):
    """Check whether `sequence` ends with the literal `suffix` (case sensitive).

    Parameters
    ----------
    sequence : str
    suffix : str

    Returns
    -------
    bool
        False when `suffix` is longer than `sequence`.

    """
    return len(suffix) <= len(sequence) and sequence.endswith(suffix)


def stem_of(word, suffix_length):
    """Get the part of `word` preceding its last `suffix_length` characters."""
    return word[:max(len(word) - suffix_length, 0)]


def contains_vowel_before_suffix(word, suffix_length):
    """Check whether the stem preceding the last `suffix_length` characters contains a vowel.

    Parameters
    ----------
    word : str
    suffix_length : int

    Returns
    -------
    bool

    Examples
    --------
    .. sourcecode:: pycon

        >>> from porterstem.parsing.suffixes import contains_vowel_before_suffix
        >>> contains_vowel_before_suffix("plastered", 2)
        True
        >>> contains_vowel_before_suffix("bled", 2)
        False

    """
    return any(is_vowel(ch) for ch in stem_of(word, suffix_length))


def replace_suffix(word, suffix_length, replacement):
    """Replace the last `suffix_length` characters of `word` with `replacement`.

    Parameters
    ----------
    word : str
    suffix_length : int
        Number of trailing characters to drop. Only call this after :func:`ends_with`
        matched a suffix of this length.
    replacement : str

    Returns
    -------
    str
        New word.

    Raises
    ------
    ValueError
        If `suffix_length` is negative or longer than `word`.

    """
    if not 0 <= suffix_length <= len(word):
        raise ValueError("cannot remove %i characters from %r" % (suffix_length, word))
    return word[:len(word) - suffix_length] + replacement
