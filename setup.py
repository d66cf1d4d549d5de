"""acme-conf - Setup configuration"""

from setuptools import setup, find_packages

setup(
    name="acme-conf",
    version="1.0.0",
    description="Local account, key and certificate storage for ACME clients",
    author="acme-conf Team",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "python-dotenv>=1.0.1",
        "pydantic>=2.6.1",
        "pydantic-settings>=2.1.0",
        "structlog>=24.1.0",
        "cryptography>=42.0.2",
        "click>=8.1.7",
        "tabulate>=0.10.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "acme-conf=acmeconf.cli.main:cli",
        ],
    },
    python_requires=">=3.11",
)
