"""
Setup script for pdfrelay.

Installs the ``pdfrelay`` library, its CLI and the FastAPI backend under
``apps.backend.app``.
"""

from setuptools import setup, find_namespace_packages
from pathlib import Path

this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text(encoding="utf-8")

with open(this_directory / "requirements.txt", encoding="utf-8") as f:
    requirements = [line.strip() for line in f if line.strip() and not line.startswith("#")]

setup(
    name="pdfrelay",
    version="0.1.0",
    description="Document conversion API relaying to Gotenberg, with local PDF transforms",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="pdfrelay contributors",
    packages=find_namespace_packages(include=["pdfrelay", "pdfrelay.*", "apps", "apps.*"]),
    install_requires=requirements,
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "pdfrelay=pdfrelay.cli.main:main",
        ],
    },
    python_requires=">=3.10",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Office/Business",
        "Framework :: FastAPI",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Operating System :: OS Independent",
    ],
    keywords="pdf gotenberg conversion split merge watermark encrypt api",
    license="MIT",
    include_package_data=True,
    zip_safe=False,
)
