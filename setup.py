#!/usr/bin/env python
from setuptools import setup, find_packages


readme = None
with open("README.md") as f:
    readme = f.read()

setup(
    name="dburl",
    version="0.1.0",
    description=(
        "Parse PostgreSQL, MySQL, SQLite and other database connection URLs "
        "into structured configuration values"),
    long_description=readme,
    long_description_content_type="text/markdown",
    license="LGPL",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.6",
    extras_require={
        "dev": [
            "freezegun",
            "mock>=2.0.0",
            "pytest>=3",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        ("License :: OSI Approved :: GNU Library or "
         "Lesser General Public License (LGPL)"),
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Topic :: Database",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    zip_safe=False,
)
