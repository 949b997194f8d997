#!/usr/bin/env python3
"""Setup script for fuzzyrank package.
"""

from setuptools import find_packages, setup

setup(
    name="fuzzyrank",
    version="0.1.0",
    description="Fuzzy string scoring and ranking built on edit distance",
    author="fuzzyrank contributors",
    packages=find_packages(include=["fuzzyrank*"]),
    python_requires=">=3.10",
    install_requires=[
        "pyyaml>=6.0",
        "rapidfuzz>=3.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "hypothesis>=6.0.0",
            "black>=23.0.0",
            "ruff>=0.1.0",
            "mypy>=1.5.0",
            "types-PyYAML>=6.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "fuzzyrank=fuzzyrank.cli:main",
        ],
    },
)
