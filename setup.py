import os
from setuptools import setup, find_packages

version = '0.2.0'

here = os.path.dirname(__file__)

with open(os.path.join(here, 'README.rst')) as fp:
    longdesc = fp.read()

with open(os.path.join(here, 'CHANGELOG.rst')) as fp:
    longdesc += "\n\n" + fp.read()

setup(
    name='n64romconvert',
    version=version,
    packages=find_packages(exclude=['tests', 'tests.*']),
    description='Detect and convert the byte ordering of '
    'Nintendo 64 ROM images (z64, n64, v64)',
    long_description=longdesc,
    install_requires=[],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'n64romconvert = n64romconvert.cli:run_convert',
            'n64romtype = n64romconvert.cli:run_type',
        ],
    },
    classifiers=[

        # "Development Status :: 1 - Planning",
        # "Development Status :: 2 - Pre-Alpha",
        # "Development Status :: 3 - Alpha",
        "Development Status :: 4 - Beta",
        # "Development Status :: 5 - Production/Stable",

        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: Implementation :: CPython",
        "Environment :: Console",
        "Topic :: Utilities",
    ],
    package_data={'': ['README.rst', 'CHANGELOG.rst']},
    zip_safe=False)
