from setuptools import find_packages, setup

setup(
    name="ctxpack",
    version="0.1.0",
    description="Context Pack - versioned, checksummed embedding indexes with similarity search",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Config and record models
        "numpy",  # Vector math
        "requests",  # Manifest and artifact downloads, remote embeddings
        "typer>=0.12",  # CLI
        "rich",  # Terminal formatting
        "pyyaml",  # YAML CLI output
        "sentence-transformers",  # Local embeddings
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-requests",  # Type stubs
            "types-PyYAML",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "ctxpack=ctxpack.cli:main",
        ],
    },
)
