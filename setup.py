"""
Setup script for the pyhashkey package.

Install with: pip install .
Install for development: pip install -e .[test]
Create wheel: python setup.py bdist_wheel
"""

from setuptools import setup

long_description = """
pyhashkey - Hash Map and Hash Set for Composite Keys
====================================================

A hash map and hash set whose key hashing and equality are supplied by the
caller, plus deterministic 32-bit hash helpers to build those functions.

Features:
- Records, lists or foreign objects as keys, compared field by field
- Bucket chaining disambiguated by the caller's equality function
- Insertion order kept across value updates
- Portable FNV-1a string hashing and int32 hash combination
- Dual API: explicit methods (get/set/has/delete) and Pythonic

Example:
    from pyhashkey import HashMap, hash_tuple

    m = HashMap(lambda k: hash_tuple(*k), lambda a, b: a == b)
    m.set(['A', 'B'], 10)
    m[['A', 'B']] = 20  # updates the existing entry
"""

setup(
    name="pyhashkey",
    version="1.0.0",
    author="Clemens Marschner",
    author_email="mail@cmarschner.net",
    description="Hash map and hash set with caller-defined key hashing and equality",
    long_description=long_description,
    long_description_content_type="text/plain",
    packages=["pyhashkey"],
    python_requires=">=3.7",
    install_requires=[],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    zip_safe=False,
)
