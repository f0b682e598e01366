#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# Licensed under the GNU LGPL v2.1 - https://www.gnu.org/licenses/old-licenses/lgpl-2.1.en.html

"""
Automated tests for the parsing module.
"""

import logging
import unittest

from porterstem.parsing.porter import PorterStemmer
from porterstem.parsing.preprocessing import (
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
from porterstem.test.utils import common_words, datapath, temporary_file

doc1 = """While it is quite useful to be able to search a
large collection of documents almost instantly"""


class TestPreprocessing(unittest.TestCase):

    def test_strip_numeric(self):
        self.assertEqual(strip_numeric("salut les amis du 59"), "salut les amis du ")

    def test_strip_short(self):
        self.assertEqual(strip_short("salut les amis du 59", 3), "salut les amis")
        self.assertEqual(strip_short("salut les amis du 59"), "salut les amis")

    def test_strip_multiple_whitespaces(self):
        self.assertEqual(strip_multiple_whitespaces("salut  les\r\nloulous!"), "salut les loulous!")

    def test_strip_punctuation(self):
        self.assertEqual(strip_punctuation("cats, ponies; and feed!"), "cats  ponies  and feed ")

    def test_strip_bytes(self):
        self.assertEqual(strip_numeric(b"salut 59"), "salut ")

    def test_strip_short_tokens(self):
        self.assertEqual(remove_short_tokens(["salut", "les", "amis", "du", "59"], 3), ["salut", "les", "amis"])

    def test_stem_text(self):
        target = \
            "while it is quit us to be abl to search a " + \
            "larg collect of document almost instantli"
        self.assertEqual(stem_text(doc1), target)

    def test_preprocess_string(self):
        self.assertEqual(preprocess_string("Th3 ponies, motoring 2day!"), ["poni", "motor", "dai"])

    def test_preprocess_string_custom_filters(self):
        filters = [lambda x: x.lower(), strip_punctuation]
        self.assertEqual(preprocess_string("Cats, ponies", filters), ["cats", "ponies"])

    def test_preprocess_documents(self):
        docs = ["Relational databases", "Happy ponies!"]
        self.assertEqual(preprocess_documents(docs), [["relat", "databas"], ["happi", "poni"]])

    def test_stem_documents(self):
        stems = PorterStemmer().stem_documents(common_words)
        self.assertEqual(stems[:4], ["caress", "poni", "cat", "feed"])
        self.assertEqual(len(stems), len(common_words))


class TestReadWords(unittest.TestCase):

    def test_read_words(self):
        words = list(read_words(datapath('voc.txt')))
        self.assertEqual(len(words), 64)
        self.assertEqual(words[:3], ['caresses', 'ponies', 'ties'])

    def test_read_compressed_words(self):
        self.assertEqual(list(read_words(datapath('voc.txt.gz'))), list(read_words(datapath('voc.txt'))))

    def test_read_words_skips_blank_lines(self):
        with temporary_file("words.txt") as fname:
            with open(fname, 'w') as fout:
                fout.write("cats\n\n  ponies  \n\n")
            self.assertEqual(list(read_words(fname)), ['cats', 'ponies'])


if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING)
    unittest.main()
