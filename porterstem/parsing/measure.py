#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# Licensed under the GNU LGPL v2.1 - https://www.gnu.org/licenses/old-licenses/lgpl-2.1.en.html

"""Compute the Porter *measure* of a character sequence.

If C is a run of consonants and V a run of vowels, any sequence can be written as
``[C](VC){m}[V]``. The measure is `m`, the number of VC pairs:

============ ====================================
measure = 0  tr, ee, tree, y, by
measure = 1  trouble, oats, trees, ivy
measure = 2  troubles, private, oaten, orrery
============ ====================================

"""

from porterstem.parsing.phonetics import is_vowel

# scanner modes
SEEKING_FIRST_VOWEL = 0
IN_VOWELS = 1
IN_CONSONANTS = 2


def measure(sequence):
    """Count the VC pairs in `sequence`.

    The scan starts in :const:`SEEKING_FIRST_VOWEL`, skipping leading consonants. A vowel
    moves it to :const:`IN_VOWELS`, and the first consonant after that moves it to
    :const:`IN_CONSONANTS`. A vowel seen in :const:`IN_CONSONANTS` closes one VC pair.
    A sequence that ends in :const:`IN_CONSONANTS` closes one more.

    Parameters
    ----------
    sequence : str

    Returns
    -------
    int
        Non-negative measure of `sequence`.

    Examples
    --------
    .. sourcecode:: pycon

        >>> from porterstem.parsing.measure import measure
        >>> measure("tree"), measure("trouble"), measure("private")
        (0, 1, 2)

    """
    mode, count = SEEKING_FIRST_VOWEL, 0
    for ch in sequence:
        vowel = is_vowel(ch)
        if mode == SEEKING_FIRST_VOWEL:
            if vowel:
                mode = IN_VOWELS
        elif mode == IN_VOWELS:
            if not vowel:
                mode = IN_CONSONANTS
        elif vowel:
            count += 1
            mode = IN_VOWELS
    if mode == IN_CONSONANTS:
        count += 1
    return count


def measure_before_suffix(word, suffix_length):
    """Get the measure of `word` without its last `suffix_length` characters.

    Parameters
    ----------
    word : str
    suffix_length : int
        Length of the trailing suffix to ignore. Values larger than ``len(word)`` leave
        an empty stem.

    Returns
    -------
    int

    """
    return measure(word[:max(len(word) - suffix_length, 0)])
