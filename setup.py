#!/usr/bin/env python
"""Setup configuration for the Bikram Sambat calendar engine."""

from setuptools import find_packages, setup

setup(
    name="bikram-sambat",
    version="0.1.0",
    description="Bikram Sambat (Nepali) calendar conversion and formatting",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.11",
    install_requires=[
        "pydantic>=2.5.0",
        "pydantic-settings>=2.0.0",
        "structlog>=23.2.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
    },
)
