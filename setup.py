from __future__ import annotations

from setuptools import find_packages, setup

setup(
    name="popcorn-watchlist",
    version="0.1.0",
    description="Movie search and watched-list backend over the OMDb API",
    # Repo convention: backend code lives under `backend/`, layered as
    # domain / application / infrastructure / server with `config` as the
    # service-side settings entrypoint.
    package_dir={"": "backend"},
    packages=find_packages(
        where="backend",
        include=[
            "domain",
            "domain.*",
            "application",
            "application.*",
            "infrastructure",
            "infrastructure.*",
            "config",
            "config.*",
            "server",
            "server.*",
        ],
    ),
    python_requires=">=3.10",
    install_requires=[
        "aiohttp>=3.9",
        "fastapi>=0.110",
        "pydantic>=2.5",
        "python-dotenv>=1.0",
        "uvicorn>=0.27",
    ],
    extras_require={
        # fastapi.testclient needs httpx.
        "test": ["httpx>=0.27", "pytest>=8"],
    },
)
