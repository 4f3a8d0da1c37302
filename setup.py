# setup.py
from setuptools import setup, find_packages

setup(
    name="mal-core",
    version="0.1.0",
    description="Value model, printer, equality and core functions for a small Lisp",
    packages=find_packages(include=["mal", "mal.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
