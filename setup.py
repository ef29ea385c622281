"""
Setup script for tilematrix

Pure Python package (src layout). Version is read from
src/tilematrix/__init__.py so it is defined in exactly one place.
"""

from pathlib import Path
from setuptools import setup, find_packages


# Read version from src/tilematrix/__init__.py
def get_version():
    version_file = Path("src/tilematrix/__init__.py")
    if version_file.exists():
        for line in version_file.read_text().splitlines():
            if line.startswith("__version__"):
                return line.split("=")[1].strip().strip('"').strip("'")
    return "0.1.0"


# Read long description from README
def get_long_description():
    readme = Path("README.md")
    if readme.exists():
        return readme.read_text(encoding="utf-8")
    return ""


setup(
    name="tilematrix",
    version=get_version(),
    description="Dense two-dimensional containers with lazy row, column and diagonal views",
    long_description=get_long_description(),
    long_description_content_type="text/markdown",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "numpy>=1.21",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "tilematrix=tilematrix.cli:main",
        ],
    },
    zip_safe=True,
)
