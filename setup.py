from setuptools import setup, find_packages

setup(
    name = "dep11gen",
    version = "0.1.0",
    packages = find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "aiofiles",
        "click>=8.2",
        "loguru",
        "pydantic>=2.0",
        "PyYAML",
        "tqdm",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio==1.1.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "dep11gen=dep11gen.cli:main",
        ],
    },
    python_requires = ">=3.10",
)
