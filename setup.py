""" ecgroup build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import ecgroup

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=ecgroup.name,
    version=ecgroup.__version__,
    license=ecgroup.__license__,
    author=ecgroup.__author__,
    author_email=ecgroup.__author_email__,
    description="Elliptic curve groups over small prime fields: points, orders, generators",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=["dataclasses-json>=0.5.7"],
    extras_require={
        "test": ["pytest"],
        "docs": ["sphinx", "sphinx_rtd_theme", "myst_parser"],
    },
    entry_points={"console_scripts": ["ecgroup=ecgroup.cli:main"]},
    keywords="elliptic-curves finite-fields group-law scalar-multiplication generators",
    python_requires=">=3.8",
    classifiers=[
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
