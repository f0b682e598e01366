#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# Licensed under the GNU LGPL v2.1 - https://www.gnu.org/licenses/old-licenses/lgpl-2.1.en.html

"""Gating conditions of the suffix rules.

A :class:`Condition` is evaluated against a word and the suffix a rule matched in it.
Most conditions look at the *stem*, the part of the word preceding that suffix.
Conditions compose with ``&``, ``|`` and ``~``.

Examples
--------
.. sourcecode:: pycon

    >>> from porterstem.parsing.conditions import measure_equals, ends_cvc
    >>> cond = measure_equals(1) & ~ends_cvc
    >>> cond
    <Condition (m=1 and not *o)>
    >>> cond("cease", "e"), cond("rate", "e")
    (True, False)

"""

from porterstem.parsing.measure import measure_before_suffix
from porterstem.parsing.phonetics import ends_with_any, ends_with_cvc, ends_with_double_consonant
from porterstem.parsing.suffixes import contains_vowel_before_suffix, ends_with, stem_of


class Condition(object):
    """Named predicate over ``(word, suffix)`` pairs.

    Parameters
    ----------
    description : str
        Short notation shown in :meth:`__repr__`, e.g. ``"m>0"`` or ``"*v*"``.
    test : function
        Callable ``test(word, suffix) -> bool``.

    """
    def __init__(self, description, test):
        self.description = description
        self.test = test

    def __call__(self, word, suffix):
        return bool(self.test(word, suffix))

    def __and__(self, other):
        return Condition(
            "(%s and %s)" % (self.description, other.description),
            lambda word, suffix: self(word, suffix) and other(word, suffix),
        )

    def __or__(self, other):
        return Condition(
            "(%s or %s)" % (self.description, other.description),
            lambda word, suffix: self(word, suffix) or other(word, suffix),
        )

    def __invert__(self):
        return Condition("not %s" % self.description, lambda word, suffix: not self(word, suffix))

    def __repr__(self):
        return "<Condition %s>" % self.description


def _stem_condition(description, predicate):
    """Wrap a predicate over the stem preceding the suffix into a :class:`Condition`."""
    return Condition(description, lambda word, suffix: predicate(stem_of(word, len(suffix))))


def measure_above(n):
    """Measure of the stem is greater than `n`."""
    return Condition("m>%i" % n, lambda word, suffix: measure_before_suffix(word, len(suffix)) > n)


def measure_equals(n):
    """Measure of the stem is exactly `n`."""
    return Condition("m=%i" % n, lambda word, suffix: measure_before_suffix(word, len(suffix)) == n)


def ends_double_consonant(exclude=''):
    """Stem ends with a double consonant other than one of `exclude`."""
    description = "*d and not (*%s)" % " or *".join(exclude) if exclude else "*d"
    return _stem_condition(
        description,
        lambda stem: ends_with_double_consonant(stem) and not ends_with_any(stem, exclude),
    )


def ends_with_chars(chars):
    """Stem ends with one of `chars`."""
    return _stem_condition(
        "(%s)" % " or ".join("*%s" % ch for ch in chars),
        lambda stem: ends_with_any(stem, chars),
    )


def not_ends_with(literal):
    """Whole word (not the stem) does not end with `literal`."""
    return Condition("not *%s" % literal, lambda word, suffix: not ends_with(word, literal))


#: stem contains a vowel
has_vowel = Condition("*v*", lambda word, suffix: contains_vowel_before_suffix(word, len(suffix)))

#: stem ends consonant - vowel - consonant, final consonant not w, x or y
ends_cvc = _stem_condition("*o", ends_with_cvc)

#: unconditional rule
always = Condition("true", lambda word, suffix: True)
