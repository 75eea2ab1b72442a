#!/usr/bin/env python3
"""
Setup script for worldkeeper package.
"""

from setuptools import setup, find_packages

setup(
    name="worldkeeper",
    version="0.1.0",
    description="Persisted configuration records for managed worlds",
    author="worldkeeper Team",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
