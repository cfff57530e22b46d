# setup.py - Package the graded ideal engine
from setuptools import setup, find_packages

setup(
    name="graded_ideal",
    version="0.1.0",
    packages=find_packages(include=["graded_ideal", "graded_ideal.*"]),
    install_requires=["numpy", "sympy"],
    extras_require={"test": ["pytest"]},
    python_requires=">=3.8",
)
