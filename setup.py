from setuptools import find_packages, setup

setup(
    name="deadlink",
    version="0.1.0",
    description="deadlink - find dead and permanently redirected links in text documents",
    packages=find_packages(include=["deadlink", "deadlink.*"]),
    python_requires=">=3.10",
    install_requires=[
        "httpx",  # Async HTTP liveness checks
        "pydantic>=2",  # Configuration and output models
        "typer",  # CLI
        "click",  # CLI context lookup
        "rich",  # Terminal formatting
        "PyYAML",  # YAML output
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
        ],
        "dev": [
            "pre-commit",  # Git hook management
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
            "types-setuptools",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "deadlink=deadlink.cli:main",
        ],
    },
)
