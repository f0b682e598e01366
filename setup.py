#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# Licensed under the GNU LGPL v2.1 - https://www.gnu.org/licenses/old-licenses/lgpl-2.1.en.html

"""
Run with::

    python ./setup.py install
"""

from pathlib import Path

from setuptools import find_packages, setup


# packages included for build-testing everywhere
core_testenv = [
    'pytest',
    'pytest-cov',
    'testfixtures',
]

install_requires = [
    'smart_open >= 1.8.1',
]

setup(
    name='porterstem',
    version='1.0.0.dev0',
    description='Porter stemming algorithm for English text search and indexing',
    long_description=Path("README.md").read_text(),
    long_description_content_type='text/markdown',
    packages=find_packages(include=['porterstem', 'porterstem.*']),
    package_data={'porterstem.test': ['test_data/*']},

    license='LGPL-2.1-only',

    keywords='Porter stemmer, stemming, suffix stripping, information retrieval, '
        'text preprocessing',

    platforms='any',

    zip_safe=False,

    classifiers=[  # from https://pypi.org/classifiers/
        'Development Status :: 4 - Beta',
        'Environment :: Console',
        'Intended Audience :: Science/Research',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Programming Language :: Python :: 3 :: Only',
        'Topic :: Text Processing :: Indexing',
        'Topic :: Text Processing :: Linguistic',
    ],

    test_suite="porterstem.test",
    python_requires='>=3.8',
    install_requires=install_requires,
    tests_require=core_testenv,
    extras_require={
        'test': core_testenv,
    },
)
