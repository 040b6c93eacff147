# setup.py
from setuptools import setup, find_packages

setup(
    name="radixcalc",
    version="0.1.0",
    description="Integer/float expression calculator with binary, octal and hex literals",
    packages=find_packages(include=["radixcalc", "radixcalc.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["radixcalc=radixcalc.repl:main"],
    },
    zip_safe=False,
)
