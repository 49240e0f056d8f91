# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="lisplib",
    version="0.1.0",
    description="Parser and tree-walking evaluator for a small S-expression language",
    python_requires=">=3.10",
    packages=find_namespace_packages(include=["lisplib", "lisplib.*"]),
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
