"""Setup script for Meeting Point Optimiser."""
from setuptools import setup, find_namespace_packages

setup(
    name="meeting-point-optimiser",
    version="1.0.0",
    description="Find the city minimizing total travel distance for a group meeting",
    packages=find_namespace_packages(include=["app", "app.*"]),
    python_requires=">=3.11",
    install_requires=[
        "fastapi",
        "uvicorn",
        "pydantic>=2",
        "pydantic-settings",
        "requests",
        "pandas",
        "streamlit",
    ],
    extras_require={
        "test": [
            "pytest",
            "httpx",
        ],
    },
    entry_points={
        "console_scripts": [
            "meeting-point=app.cli:main",
        ],
    },
)
