#!/usr/bin/env python

"""The setup script."""

import pathlib

from setuptools import find_packages, setup

readme = pathlib.Path("README.rst").read_text()
history = pathlib.Path("HISTORY.rst").read_text()

requirements = pathlib.Path("requirements.txt").read_text().strip().splitlines()

setup(
    author="sparsearrayset developers",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: GNU General Public License v2 or later (GPLv2+)",
        "Natural Language :: English",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: Mathematics",
    ],
    description="A flat-array set of vertex identifiers for graph algorithms",
    install_requires=requirements,
    extras_require={"test": ["pytest"]},
    license="GNU General Public License v2 or later",
    long_description="{}\n\n{}".format(readme, history),
    include_package_data=True,
    keywords="sparsearrayset",
    name="sparsearrayset",
    packages=find_packages(include=["sparsearrayset", "sparsearrayset.*"]),
    version="0.1.0",
    zip_safe=False,
    python_requires=">=3.8",
)
