#!/usr/bin/env python
"""
Copyright 2025 Hathor Labs

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

   http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

import re
from pathlib import Path

from setuptools import find_packages, setup

# read the version without importing the package, its dependencies are not available at build time
_version_file = Path(__file__).parent / 'functions_request' / 'version.py'
__version__ = re.search(r"^BASE_VERSION = '([^']+)'", _version_file.read_text(), re.MULTILINE).group(1)

setup(
    name='functions-request',
    version=__version__,
    description='Builder and CBOR encoder for off-chain computation requests',
    author='Hathor Team',
    author_email='contact@hathor.network',
    url='https://hathor.network/',
    license='Apache-2.0',
    entry_points={
        'console_scripts': ['functions-request=functions_request_cli.main:main'],
    },
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
        'License :: OSI Approved :: Apache Software License',
    ],
    python_requires='>=3.10',
    packages=find_packages(include=('functions_request', 'functions_request.*', 'functions_request_cli')),
    package_data={
        'functions_request.conf': ['*.yml'],
    },
    install_requires=[
        'colorama',
        'configargparse',
        'pydantic>=2',
        'pyyaml',
        'structlog',
        'typing_extensions>=4.4',
    ],
    extras_require={
        'test': [
            'cbor2',
            'pytest',
        ],
    },
)
