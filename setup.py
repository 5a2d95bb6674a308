"""
Setup script for admath.

To install:
    pip install .

To install in development mode with test dependencies:
    pip install -e ".[test]"

To build wheel:
    pip wheel . --no-deps
"""

import os

from setuptools import setup, find_packages

setup(
    name="admath",
    version="0.3.0",
    author="admath contributors",
    author_email="",
    description="admath: Baillie-PSW primality, modular arithmetic and seedable PRNGs",
    long_description=open("README.md").read() if os.path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    packages=find_packages(include=["admath", "admath.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.20",
        "PyYAML>=5.4",
    ],
    extras_require={
        "test": [
            "pytest>=6.0",
            "sympy>=1.9",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Topic :: Security :: Cryptography",
    ],
    keywords="primality baillie-psw lucas jacobi pcg xoshiro modular-arithmetic",
)
