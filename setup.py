"""Setup configuration for stockbot package."""

import re
from pathlib import Path

from setuptools import find_packages, setup

# Read the README file
this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text(encoding="utf-8")

# Read version from __init__.py without importing the package
init_text = (this_directory / "stockbot" / "__init__.py").read_text(encoding="utf-8")
version = re.search(r'^__version__ = "([^"]+)"', init_text, re.M).group(1)

setup(
    name="stockbot",
    version=version,
    author="quinn",
    author_email="your.email@example.com",
    description="Fetch daily stock prices, fit a return trend and project a future price",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/yourusername/stockbot",
    project_urls={
        "Bug Tracker": "https://github.com/yourusername/stockbot/issues",
        "Source Code": "https://github.com/yourusername/stockbot",
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Financial and Insurance Industry",
        "Intended Audience :: Developers",
        "Topic :: Office/Business :: Financial :: Investment",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=["tests", "tests.*", "docs", "examples"]),
    python_requires=">=3.11",
    install_requires=[
        "numpy>=1.24.0",
        "pandas>=2.0.0",
        "requests>=2.31.0",
        "python-dotenv>=1.0.0",
        "matplotlib>=3.7.0",
        "scikit-learn>=1.3.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
        ],
        "dev": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
            "black>=23.0.0",
            "flake8>=6.0.0",
            "mypy>=1.5.0",
            "isort>=5.12.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "stockbot=stockbot.cli:main",
        ],
    },
    include_package_data=True,
    zip_safe=False,
)
