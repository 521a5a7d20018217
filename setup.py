from setuptools import setup, find_packages

setup(
    name="hs_deckstring",
    version="0.1.0",
    packages=find_packages(include=["hs_deckstring", "hs_deckstring.*"]),
    install_requires=[
        "pydantic>=2",
        "pandas",
        "pyyaml",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "hs-deck=hs_deckstring.cli:main",
        ]
    },
)
