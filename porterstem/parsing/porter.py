#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# Licensed under the GNU LGPL v2.1 - https://www.gnu.org/licenses/old-licenses/lgpl-2.1.en.html

"""Porter Stemming Algorithm

Reduce an English word to its stem by five ordered steps of suffix stripping, following

Porter, 1980, An algorithm for suffix stripping, Program, Vol. 14,
no. 3, pp 130-137.

This version classifies `y` as a consonant everywhere, and keeps a few quirks of the
reference outputs it reproduces:

* step 1b does not restore -ate, -ble or -ize (conflated -> conflat),
* step 2 leaves -eli unchanged and has no -logi rule,
* step 4 removes -ion only after s or t.

Each step is a pure function from word to word, driven by the rule tables in
:mod:`porterstem.parsing.rules`. The full pipeline is::

    stem(word) = step5(step4(step3(step2(step1(word)))))

Examples
--------

.. sourcecode:: pycon

    >>> from porterstem.parsing.porter import stem
    >>> stem("relational")
    'relat'

    >>> from porterstem.parsing.porter import PorterStemmer
    >>> p = PorterStemmer()
    >>> p.stem_sentence("Cats and ponies have meeting")
    'cat and poni have meet'
    >>> p.stem_documents(["Cats and ponies", "have meeting"])
    ['cat and poni', 'have meet']

"""

import logging
import multiprocessing
import signal

from porterstem import utils
from porterstem.parsing.rules import (
    DROP_DOUBLE_CONSONANT, RESTORE_FINAL_E, STEP1A_RULES, STEP1B_RESTORING, STEP1B_RULES, STEP1C_RULES,
    STEP2_RULES, STEP3_RULES, STEP4_RULES, STEP5A_RULES, STEP5B_RULES, apply_rules, dispatch, match_rule,
)
from porterstem.parsing.suffixes import replace_suffix

logger = logging.getLogger(__name__)

#: words of this length or shorter are returned unchanged
MIN_STEM_LENGTH = 2

#: number of words sent to a worker process at once by :func:`stem_words`
DEFAULT_CHUNKSIZE = 1000


def step1a(word):
    """Get rid of plurals. E.g.,

       caresses  ->  caress
       ponies    ->  poni
       caress    ->  caress
       cats      ->  cat
    """
    return apply_rules(word, STEP1A_RULES)


def _restore_ending(word):
    """Tidy up the stem left behind by removing -ed or -ing.

    A double consonant other than l, s or z loses its final letter (hopp -> hop); a short
    stem ending consonant - vowel - consonant gets its e back (fil -> file).
    """
    if DROP_DOUBLE_CONSONANT(word, ''):
        return word[:-1]
    if RESTORE_FINAL_E(word, ''):
        return word + 'e'
    return word


def step1b(word):
    """Get rid of -eed, -ed and -ing. E.g.,

       feed      ->  feed
       agreed    ->  agree
       plastered ->  plaster
       bled      ->  bled
       motoring  ->  motor
       sing      ->  sing
       hopping   ->  hop
       filing    ->  file
    """
    rule = match_rule(word, STEP1B_RULES)
    if rule is None or not rule.condition(word, rule.suffix):
        return word
    stemmed = replace_suffix(word, rule.length, rule.replacement)
    if rule.suffix in STEP1B_RESTORING:
        return _restore_ending(stemmed)
    return stemmed


def step1c(word):
    """Turn terminal y to i when there is a vowel before it (happy -> happi, sky -> sky)."""
    return apply_rules(word, STEP1C_RULES)


def step1(word):
    return step1c(step1b(step1a(word)))


def step2(word):
    """Map double suffixes to single ones.

    So, -ization ( = -ize plus -ation) maps to -ize etc. Note that the stem before the
    suffix must have a measure greater than 0.
    """
    return apply_rules(word, dispatch(word, STEP2_RULES))


def step3(word):
    """Deal with -ic-, -ful, -ness etc. (triplicate -> triplic, formative -> form)."""
    return apply_rules(word, STEP3_RULES)


def step4(word):
    """Take off -ant, -ence etc., in context <c>vcvc<v> (revival -> reviv, adoption -> adopt)."""
    return apply_rules(word, dispatch(word, STEP4_RULES))


def step5a(word):
    """Remove a final -e if the measure of the stem is above 1, or exactly 1 and the stem does
    not end consonant - vowel - consonant (probate -> probat, rate -> rate, cease -> ceas)."""
    return apply_rules(word, STEP5A_RULES)


def step5b(word):
    """Change -ll to -l if the measure is above 1 (controll -> control, roll -> roll)."""
    return apply_rules(word, STEP5B_RULES)


def step5(word):
    return step5b(step5a(word))


def stem(word):
    """Stem the word `word` and return the stemmed form.

    Only lower case sequences are stemmed. Forcing to lower case should be done before
    :func:`stem` is called, e.g. by :meth:`PorterStemmer.stem`.

    Parameters
    ----------
    word : str

    Returns
    -------
    str
        Stemmed version of `word`. Words of :const:`MIN_STEM_LENGTH` characters or fewer
        are returned unchanged.

    """
    if len(word) <= MIN_STEM_LENGTH:
        return word
    return step5(step4(step3(step2(step1(word)))))


def _init_worker():
    """Ignore SIGINT in pool workers; the parent process handles interruption."""
    signal.signal(signal.SIGINT, signal.SIG_IGN)


def _stem_chunk(words):
    return [stem(word) for word in words]


def stem_words(words, processes=1, chunksize=DEFAULT_CHUNKSIZE):
    """Stem every word from `words`, keeping the input order.

    Parameters
    ----------
    words : iterable of str
        Lower case words.
    processes : int, optional
        Number of worker processes. With 1 (default) everything runs in this process.
    chunksize : int, optional
        Number of words handed to a worker at once.

    Yields
    ------
    str
        Stem of each input word, in input order.

    Raises
    ------
    ValueError
        If `processes` or `chunksize` is smaller than 1.

    """
    if processes < 1:
        raise ValueError("processes must be at least 1, got %r" % processes)
    if chunksize < 1:
        raise ValueError("chunksize must be at least 1, got %r" % chunksize)

    if processes == 1:
        for word in words:
            yield stem(word)
        return

    logger.info("stemming with %i worker processes, %i words per chunk", processes, chunksize)
    pool = multiprocessing.Pool(processes, _init_worker)
    try:
        # imap preserves order; chunking keeps the whole input from being pickled at once
        for stems in pool.imap(_stem_chunk, utils.chunkize_serial(words, chunksize)):
            for stemmed in stems:
                yield stemmed
    finally:
        pool.terminate()


class PorterStemmer(object):
    """Class based entry point, handy when a stemmer object has to be passed around.

    The stemmer holds no state, so one instance can be shared between threads.

    """
    def stem(self, w):
        """Lowercase and stem the word `w`, return the stemmed form.

        Parameters
        ----------
        w : str

        Returns
        -------
        str
            Stemmed version of `w`.

        Examples
        --------
        .. sourcecode:: pycon

            >>> from porterstem.parsing.porter import PorterStemmer
            >>> p = PorterStemmer()
            >>> p.stem("Motoring")
            'motor'

        """
        return stem(w.lower())

    def stem_sentence(self, txt):
        return " ".join(self.stem(x) for x in txt.split())

    def stem_documents(self, docs):
        return [self.stem_sentence(x) for x in docs]
