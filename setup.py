#!/usr/bin/env python
"""Setup script for the TTRPG Name Generator."""

from setuptools import setup, find_packages
from pathlib import Path

# Read the README file
this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text(encoding='utf-8')

setup(
    name="ttrpg-namegen",
    version="0.1.0",
    author="MDMAI Project",
    description="Deterministic, seeded, theme-driven name generator for TTRPG NPCs, buildings, cities, districts, streets and factions",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/Raudbjorn/MDMAI",
    packages=find_packages(where=".", include=["namegen*", "config*"]),
    package_dir={"": "."},
    package_data={
        "namegen.themes.data": ["*.json"],
    },
    include_package_data=True,
    python_requires=">=3.9",
    install_requires=[
        # Settings and theme schema
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        "python-dotenv>=1.0.0",

        # Error handling
        "returns>=0.22.0",

        # Logging and console output
        "structlog>=23.0.0",
        "rich>=13.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
            "hypothesis>=6.80.0",
            "black>=23.0.0",
            "flake8>=6.0.0",
            "mypy>=1.4.0",
            "isort>=5.12.0",
        ],
        "test": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
            "hypothesis>=6.80.0",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Games/Entertainment :: Role-Playing",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    keywords="ttrpg rpg names procedural generation",
    project_urls={
        "Bug Reports": "https://github.com/Raudbjorn/MDMAI/issues",
        "Source": "https://github.com/Raudbjorn/MDMAI",
    },
)
