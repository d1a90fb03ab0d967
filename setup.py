import io
import os
from os import path
import re

from setuptools import find_packages
from setuptools import setup

MYDIR = path.abspath(os.path.dirname(__file__))


def get_version():
    with io.open(path.join(MYDIR, 'merlin', 'version.py'), encoding='utf-8') as f:
        match = re.search(r"__version__ = '([^']+)'", f.read())

    assert match is not None
    return match.group(1)


setup(
    name='merlin',
    version=get_version(),
    description='Chainable, Express-style helpers for HTTP responses.',
    license='Apache-2.0',
    classifiers=[
        'Development Status :: 5 - Production/Stable',
        'Environment :: Web Environment',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: Apache Software License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Topic :: Internet :: WWW/HTTP :: WSGI',
    ],
    packages=find_packages(exclude=['tests', 'tests.*']),
    python_requires='>=3.8',
    install_requires=[],
    extras_require={
        'tests': ['pytest'],
    },
)
