#!/usr/bin/env python
# encoding: utf-8

"""Module contains common utilities used in automated code tests for porterstem modules.

Attributes:
-----------
module_path : str
    Full path to this module directory.

common_words : list of str
    Toy vocabulary.


Examples:
---------
We can find our toy vocabulary in test data directory.

>>> from porterstem.test.utils import datapath
>>>
>>> with open(datapath("voc.txt")) as f:
...     words = [line.strip() for line in f]
>>> print(words[0])
caresses

"""

import contextlib
import tempfile
import os
import shutil

module_path = os.path.dirname(__file__)  # needed because sample data files are located in the same folder

common_words = [
    'caresses', 'ponies', 'cats', 'feed', 'plastered', 'motoring', 'relational',
    'conditional', 'triplicate', 'formalize', 'revival', 'allowance', 'adoption',
]


def datapath(fname):
    """Get full path for file `fname` in test data directory placed in this module directory.

    Parameters
    ----------
    fname : str
        Name of file.

    Returns
    -------
    str
        Full path to `fname` in test_data folder.

    """
    return os.path.join(module_path, 'test_data', fname)


def get_tmpfile(suffix):
    """Get full path to file `suffix` in temporary folder.
    This function doesn't create the file (only generates a unique name).
    Also, it may return different paths in consecutive calling.

    Parameters
    ----------
    suffix : str
        Suffix of file.

    Returns
    -------
    str
        Path to `suffix` file in temporary folder.

    """
    return os.path.join(tempfile.mkdtemp(), suffix)


@contextlib.contextmanager
def temporary_file(name=""):
    """This context manager creates file `name` in temporary directory and returns its full path.
    Temporary directory with included files will be deleted at the end of context. Note, it won't create file.

    Parameters
    ----------
    name : str
        Filename.

    Yields
    ------
    str
        Path to file `name` in temporary directory.

    Examples
    --------
    >>> import os
    >>> from porterstem.test.utils import temporary_file
    >>> with temporary_file("temp.txt") as tf, open(tf, 'w') as outfile:
    ...     _ = outfile.write("relational")
    ...     filename = tf
    >>> os.path.exists(filename)
    False

    """
    tmp = tempfile.mkdtemp()
    try:
        yield os.path.join(tmp, name)
    finally:
        shutil.rmtree(tmp, ignore_errors=True)
