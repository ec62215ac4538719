"""Package setup for besrest."""

from setuptools import setup, find_packages

setup(
    name="besrest",
    version="1.0.0",
    description="Client for the BES fleet-management REST API with site content export",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "requests>=2.31.0",
        "lxml>=5.0.0",
        "urllib3>=2.0.0",
        "tqdm>=4.66.0",
        "colorlog>=6.8.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
)
