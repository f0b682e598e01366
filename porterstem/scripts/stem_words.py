#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# Licensed under the GNU LGPL v2.1 - https://www.gnu.org/licenses/old-licenses/lgpl-2.1.en.html

"""This script stems a word list: it reads one word per line and writes the stem of each
word on its own line, in input order.

Notes
-----

Input format, words are expected in lower case ::

    caresses
    ponies
    relational

Output format ::

    caress
    poni
    relat


How to use
----------

.. sourcecode:: pycon

    >>> from porterstem.test.utils import datapath, get_tmpfile
    >>> from porterstem.scripts.stem_words import stem_file
    >>>
    >>> tmp_file = get_tmpfile("stems.txt")
    >>> num_words = stem_file(datapath("voc.txt"), tmp_file)

Command line arguments
----------------------

.. program-output:: python -m porterstem.scripts.stem_words --help
   :ellipsis: 0, -5

"""
import sys
import logging
import argparse

from porterstem import utils
from porterstem.parsing.porter import DEFAULT_CHUNKSIZE, stem_words
from porterstem.parsing.preprocessing import read_words

logger = logging.getLogger(__name__)


def _write_stems(stems, fout):
    num_words = 0
    for num_words, stemmed in enumerate(stems, start=1):
        fout.write(stemmed + '\n')
    return num_words


def stem_file(input_path, output=None, processes=1, chunksize=DEFAULT_CHUNKSIZE):
    """Stem every word of the word list `input_path`.

    Parameters
    ----------
    input_path : str
        Path or URI of a newline delimited word list.
    output : str, optional
        Path or URI of the output file. If None, stems are written to standard output.
    processes : int, optional
        Number of worker processes used for stemming.
    chunksize : int, optional
        Number of words handed to a worker process at once.

    Returns
    -------
    int
        Number of words stemmed.

    """
    logger.info("stemming words from %s", input_path)
    stems = stem_words(read_words(input_path), processes=processes, chunksize=chunksize)
    if output is None:
        num_words = _write_stems(stems, sys.stdout)
    else:
        with utils.open(output, 'w', encoding='utf8') as fout:
            num_words = _write_stems(stems, fout)
    logger.info("stemmed %i words from %s", num_words, input_path)
    return num_words


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__[:-135], formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("input", help="Path to input file with one word per line")
    parser.add_argument("-o", "--output", help="Path to output file, standard output if omitted")
    parser.add_argument(
        "-p", "--processes", type=int, default=1,
        help="Number of worker processes to stem with (default: %(default)s)",
    )
    args = parser.parse_args(argv)

    logger.info("running %s", ' '.join(sys.argv))
    stem_file(args.input, args.output, processes=args.processes)
    return 0


if __name__ == "__main__":
    logging.basicConfig(format='%(asctime)s - %(module)s - %(levelname)s - %(message)s', level=logging.INFO)
    sys.exit(main())
