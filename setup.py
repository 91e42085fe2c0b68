from setuptools import setup, find_packages

setup(
    name="quickspellfix",
    version="0.1.0",
    description="QuickSpellFix: fix the previous misspelled word, cycle suggestions, restore",
    packages=find_packages(exclude=["tests"]),
    python_requires=">=3.8",
    install_requires=[
        "pyspellchecker>=0.7",
        "requests",
        "PyQt5",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "quickspellfix=quickspellfix.main:main",
        ],
    },
)
