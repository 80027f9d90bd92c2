# setup.py
from setuptools import setup, find_packages

setup(
    name="ballgame",
    version="0.1.0",
    packages=find_packages(include=["ballgame", "ballgame.*", "ballgame_lsp", "ballgame_lsp.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pygls>=1.1,<2",
        "lsprotocol",
    ],
    extras_require={
        "test": ["pytest", "hypothesis>=6.84"],
    },
    entry_points={
        "console_scripts": [
            "ballgame=ballgame.cli:main",
            "ballgame-ls=ballgame_lsp.server:main",
            "ballgame-repl-server=ballgame_lsp.repl_server:main",
        ],
    },
    zip_safe=False,
)
