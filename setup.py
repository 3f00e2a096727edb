#!/usr/bin/env python3
"""Setup script for the blog GraphQL API."""

from setuptools import find_packages, setup

setup(
    name="blogapi",
    version="0.1.0",
    description="GraphQL blog backend with bearer-token authentication",
    packages=find_packages(include=["blogapi", "blogapi.*"]),
    python_requires=">=3.11",
    install_requires=[
        "fastapi>=0.110",
        "uvicorn[standard]>=0.29",
        "strawberry-graphql[fastapi]>=0.230",
        "graphql-core>=3.2",
        "sqlalchemy[asyncio]>=2.0",
        "aiosqlite>=0.19",
        "pydantic[email]>=2.5",
        "pydantic-settings>=2.1",
        "python-jose[cryptography]>=3.3",
        "passlib[bcrypt]>=1.7.4",
        # passlib 1.7.4 breaks against newer bcrypt releases
        "bcrypt>=4.0,<4.1",
        "loguru>=0.7",
        "prometheus-client>=0.19",
    ],
    extras_require={
        "postgres": ["asyncpg>=0.29"],
        "test": [
            "pytest>=8.0",
            "pytest-asyncio>=0.23",
            "httpx>=0.27",
            "faker>=24.0",
        ],
    },
)
