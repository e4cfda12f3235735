from setuptools import setup, find_packages

setup(
    name="npmjs-mcp-server",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "mcp<2",
        "pydantic",
        "pytz",
        "requests",
        "typer",
    ],
    extras_require={
        "dev": [
            "pytest",
            "pytest-cov",
            "pytest-mock",
            "mypy",
            "black",
            "types-pytz",
            "types-requests",
        ],
    },
    entry_points={
        "console_scripts": [
            "npmjs-mcp-server=npmjs_mcp_server.cli.main_cli:app",
        ],
    },
    author="Damian Vicino",
    author_email="damian.vicino@datadoghq.com",
    description="An MCP server exposing npm registry metadata, download counts and npm audit results",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    url="https://github.com/DataDog/npmjs-mcp-server",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
)
