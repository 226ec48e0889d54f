from setuptools import setup, find_packages

setup(
    name="simplehttp",
    version="0.1.0",
    description="Fluent request builder and thin response wrapper for httpx",
    author="SimpleHttp Team",
    packages=find_packages(include=["simplehttp", "simplehttp.*"]),
    install_requires=[
        "httpx>=0.25.1",
        "pydantic>=2.0",
        "structlog>=23.1",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.21",
        ],
    },
    python_requires=">=3.10",
)
