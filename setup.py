# setup.py
from setuptools import setup, find_packages

setup(
    name="schemey",
    version="0.1.0",
    description="A small Scheme interpreter with a language server",
    python_requires=">=3.10",
    packages=find_packages(include=["schemey", "schemey.*", "schemey_lsp", "schemey_lsp.*"]),
    install_requires=[
        "pygls>=1.1,<2",
        "lsprotocol",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": [
            "schemey=schemey.cli:main",
            "schemey-ls=schemey_lsp.server:main",
            "schemey-repl-server=schemey_lsp.repl_server:main",
        ],
    },
    zip_safe=False,
)
