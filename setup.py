from setuptools import find_packages, setup

setup(
    name="mcpreg",
    version="0.3.0",
    description="MCP server registry search and mcp-config.json management over MCP stdio",
    author="William Wieselquist",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Config and output models
        "requests",  # Registry README and GitHub API fetches
        "typer<0.26",  # CLI; 0.26+ vendors its own click, breaking shared click context/exceptions
        "click",  # Context access and exceptions under Typer
        "rich",  # Terminal formatting
        "pyyaml",  # YAML output for CLI
        "pygments",  # Output highlighting on a TTY
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
            "types-requests",  # Type stubs
            "types-PyYAML",  # Type stubs
            "types-setuptools",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            # Primary CLI name
            "mcpreg=mcpreg.cli:main",
            # MCP stdio server
            "mcpregm=mcpreg.mcp.main:main",
        ],
    },
)
