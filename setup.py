#
# (c) Copyright 2022 by Coinkite Inc. This file is covered by license found in COPYING-CC.
#
#
# crypto-hdkey UR registry item, with BIP-32 rendering
#

# To use this command to install and yet be able to edit the code (here). Great for dev:
#
#   pip install --editable .
#
# with cli dependencies
#
#   pip install --editable '.[cli]'
#
# with test dependencies
#
#   pip install --editable '.[test]'
#
#
import re
from setuptools import setup

# read version without importing the package (needs cbor2 already)
with open("urhdkey/__init__.py", "r") as fh:
    __version__ = re.search(r"^__version__ = '([^']+)'", fh.read(), re.M).group(1)

# these minimum versions are tested, some earlier values would probably work too.
requirements = [
    'cbor2>=5.9.0',
    'base58>=2.1.1',
]

cli_requirements = [
    'click>=8.0.3',
]

test_requirements = [
    'pytest',
] + cli_requirements

with open("README.md", "r") as fh:
    long_description = fh.read()

setup(
    name='urhdkey',
    version=__version__,
    packages=[ 'urhdkey' ],
    python_requires='>3.6.0',
    install_requires=requirements,
    extras_require={
        'cli': cli_requirements,
        'test': test_requirements,
    },
    description="crypto-hdkey UR registry item: CBOR codec and BIP-32 extended keys",
    long_description=long_description,
    long_description_content_type="text/markdown",
    entry_points='''
        [console_scripts]
        urhdkey=urhdkey.cli:main
    ''',
    classifiers=[
        'Operating System :: POSIX :: Linux',
        'Operating System :: Microsoft :: Windows',
        'Operating System :: MacOS :: MacOS X',
    ],
)
