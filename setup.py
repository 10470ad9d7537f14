#!/usr/bin/env python3
"""
Setup script for bedazzle
Minimal installation with smart defaults
"""

from pathlib import Path
from setuptools import setup, find_packages

# Read version from package
version = "0.1.0"

# Minimal dependencies - just what we absolutely need
install_requires = [
    "pyjson5>=1.6.9",  # Config file parsing (comments allowed)
    "fastjsonschema>=2.20",  # Config validation
]

# Optional dependencies for enhanced features
extras_require = {
    "dev": [
        "pytest>=7.0.0",
        "pexpect>=4.8.0",  # Drives the console script end to end
        "black>=22.0.0",
        "mypy>=0.950",
    ],
}

setup(
    name="bedazzle",
    version=version,
    description="Progressively decorate immutable objects with decorator functions",
    long_description=open("README.md").read() if Path("README.md").exists() else "",
    long_description_content_type="text/markdown",
    python_requires=">=3.8",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=install_requires,
    extras_require=extras_require,
    entry_points={
        "console_scripts": [
            "bedazzle=bedazzle.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
