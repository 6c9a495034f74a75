# setup.py
from setuptools import setup, find_packages

setup(
    name="bprog",
    version="0.3.0",
    description="Interpreter for the bprog postfix stack language",
    packages=find_packages(include=["bprog", "bprog.*", "bprog_lsp"]),
    python_requires=">=3.10",
    install_requires=[
        "pygls>=1.1,<2",
        "lsprotocol",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": [
            "bprog=bprog.repl:main",
            "bprog-ls=bprog_lsp.server:main",
            "bprog-repl-server=bprog_lsp.repl_server:main",
        ],
    },
    zip_safe=False,
)
