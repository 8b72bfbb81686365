# setup.py
from setuptools import setup, find_packages

setup(
    name="minischeme",
    version="0.1.0",
    description="Tree-walking evaluator for a minimal Scheme, with a static language server",
    packages=find_packages(include=["minischeme", "minischeme.*", "minischeme_lsp", "minischeme_lsp.*"]),
    python_requires=">=3.11",
    install_requires=[
        "pygls>=1.1,<2",
        "lsprotocol",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "minischeme=minischeme.__main__:main",
            "minischeme-ls=minischeme_lsp.server:main",
        ],
    },
    zip_safe=False,
)
