"""Setup script for unitgraph."""

from pathlib import Path

from setuptools import find_packages, setup


def read_readme():
    """Use DESIGN.md as the long description when present."""
    readme = Path(__file__).parent / "DESIGN.md"
    if readme.exists():
        return readme.read_text(encoding="utf-8")
    return ""


setup(
    name="unitgraph",
    version="0.1.0",
    description="Module dependency graph and package publication for multi-unit library builds",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
    python_requires=">=3.10",
    packages=find_packages(include=["unitgraph", "unitgraph.*"]),
    install_requires=[
        "click>=8.1",
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
        "dependency-injector>=4.41",
        "sqlalchemy>=2.0",
        "tomli>=2.0; python_version<'3.11'",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
        ],
    },
    entry_points={
        "console_scripts": [
            "unitgraph=unitgraph.__main__:main",
        ],
    },
)
