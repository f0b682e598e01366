#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# Licensed under the GNU LGPL v2.1 - https://www.gnu.org/licenses/old-licenses/lgpl-2.1.en.html

"""Character classification used by the suffix rules.

Only `a`, `e`, `i`, `o` and `u` count as vowels. Every other character, `y` included,
is a consonant.

Examples
--------
.. sourcecode:: pycon

    >>> from porterstem.parsing.phonetics import ends_with_cvc, ends_with_double_consonant
    >>> ends_with_cvc("hop"), ends_with_cvc("snow")
    (True, False)
    >>> ends_with_double_consonant("fall"), ends_with_double_consonant("tree")
    (True, False)

"""

VOWELS = frozenset('aeiou')

#: final consonants that never complete a consonant-vowel-consonant ending
CVC_EXCLUDED = frozenset('wxy')

VOWEL_CLASS = 0
CONSONANT_CLASS = 1


def is_vowel(ch):
    """Check whether `ch` is one of a, e, i, o, u.

    Parameters
    ----------
    ch : str
        Single character.

    Returns
    -------
    bool

    """
    return ch in VOWELS


def is_consonant(ch):
    return not is_vowel(ch)


def char_class(ch):
    """Get :const:`VOWEL_CLASS` for a vowel, :const:`CONSONANT_CLASS` otherwise."""
    return VOWEL_CLASS if is_vowel(ch) else CONSONANT_CLASS


def ends_with_any(sequence, chars):
    """Check whether the last character of `sequence` is one of `chars`.

    Parameters
    ----------
    sequence : str
    chars : iterable of str

    Returns
    -------
    bool
        False for an empty `sequence`.

    """
    return bool(sequence) and sequence[-1] in chars


def ends_with_cvc(sequence):
    """Check whether `sequence` ends with consonant - vowel - consonant, where the final
    consonant is not w, x or y. This is used when restoring an e at the end of a short
    word, e.g. cav(e), lov(e), hop(e), crim(e), but snow, box, tray.

    Parameters
    ----------
    sequence : str

    Returns
    -------
    bool
        False if `sequence` has fewer than 3 characters.

    """
    if len(sequence) < 3 or ends_with_any(sequence, CVC_EXCLUDED):
        return False
    pattern = tuple(char_class(ch) for ch in sequence[-3:])
    return pattern == (CONSONANT_CLASS, VOWEL_CLASS, CONSONANT_CLASS)


def ends_with_double_consonant(sequence):
    """Check whether the last two characters of `sequence` are the same consonant.

    Parameters
    ----------
    sequence : str

    Returns
    -------
    bool
        False if `sequence` has fewer than 2 characters.

    """
    if len(sequence) < 2:
        return False
    return sequence[-1] == sequence[-2] and is_consonant(sequence[-1])
