"""
Setup file.
"""

import os

from setuptools import find_packages, setup

KEYWORDS = "education exercises grading ant maven make junit check checkstyle"
HERE = os.path.dirname(os.path.abspath(__file__))

INSTALL_REQUIRES = [
    "requests>=2.28",
    "tqdm>=4.64",
]

TEST_REQUIRES = [
    "pytest>=7.0",
]


if __name__ == "__main__":
    setup(
        name="tmclangs",
        version="0.1.0",
        description="Build and test programming exercises written with different toolchains",
        keywords=KEYWORDS,
        python_requires=">=3.9",
        package_dir={"": "src"},
        packages=find_packages(where="src"),
        install_requires=INSTALL_REQUIRES,
        extras_require={"test": TEST_REQUIRES},
        entry_points={"console_scripts": ["tmc-langs = tmclangs.cli:main"]},
        include_package_data=True)
