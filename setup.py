"""Setup module for adurosmart"""

import pathlib

from setuptools import find_packages, setup

import adurosmart

REQUIRES = [
    "attrs",
    "frozendict",
    "voluptuous",
]

TESTS_REQUIRE = [
    "pytest",
    "pytest-asyncio",
]

setup(
    name="adurosmart",
    version=adurosmart.__version__,
    description="AduroSmart Zigbee device catalogue",
    long_description=(pathlib.Path(__file__).parent / "README.md").read_text(),
    long_description_content_type="text/markdown",
    license="GPL-3.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=REQUIRES,
    extras_require={"testing": TESTS_REQUIRE},
    python_requires=">=3.9",
)
