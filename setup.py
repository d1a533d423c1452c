#!/usr/bin/env python3
"""
Setup script for recordtable.
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read README for long description
readme_path = Path(__file__).parent / "README.md"
if readme_path.exists():
    with open(readme_path, "r", encoding="utf-8") as f:
        long_description = f.read()
else:
    long_description = "Aligned text tables and CSV from dataclass records"

# Read requirements
requirements_path = Path(__file__).parent / "requirements.txt"
if requirements_path.exists():
    with open(requirements_path, "r", encoding="utf-8") as f:
        requirements = [
            line.strip()
            for line in f
            if line.strip() and not line.startswith("#")
        ]
else:
    requirements = ["PyYAML>=6.0", "rich>=13.0.0"]

setup(
    name="recordtable",
    version="0.1.0",
    description="Aligned text tables and CSV from dataclass records",
    long_description=long_description,
    long_description_content_type="text/markdown",

    # Package information
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=requirements,

    # Optional dependencies
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "black>=22.0.0",
            "mypy>=1.0.0",
            "flake8>=5.0.0"
        ],
    },

    # Entry points
    entry_points={
        "console_scripts": [
            "recordtable=recordtable.core.cli_app:main",
        ]
    },

    # Classifiers
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Text Processing",
        "Topic :: Utilities",
        "Environment :: Console"
    ],

    keywords="table, csv, dataclass, command line",
    include_package_data=True,
    zip_safe=False,
)
