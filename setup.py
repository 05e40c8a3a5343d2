# -*- coding: utf-8 -*-
#
# Copyright (c), 2026, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
from setuptools import setup, find_packages

with open("README.rst") as readme:
    long_description = readme.read()

setup(
    name='xmlvalue',
    version='1.0.0',
    packages=find_packages(include=['xmlvalue', 'xmlvalue.*']),
    package_data={'xmlvalue': ['py.typed']},
    author='Davide Brunato',
    author_email='brunato@sissa.it',
    keywords=['XML', 'XPath', 'XSLT', 'immutable', 'lxml'],
    license='MIT',
    license_files=['LICENSE'],
    description='Immutable and thread-safe XML documents with XPath queries '
                'and XSLT transformations',
    long_description=long_description,
    python_requires='>=3.9',
    install_requires=['lxml>=4.9'],
    extras_require={
        'dev': ['tox', 'coverage', 'flake8', 'mypy', 'lxml-stubs']
    },
    classifiers=[
        'Development Status :: 5 - Production/Stable',
        'Intended Audience :: Developers',
        'Intended Audience :: Information Technology',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3 :: Only',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Programming Language :: Python :: 3.13',
        'Programming Language :: Python :: Implementation :: CPython',
        'Topic :: Software Development :: Libraries',
        'Topic :: Text Processing :: Markup :: XML',
    ]
)
