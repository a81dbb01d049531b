"""Setup configuration for Order Browser package."""

from setuptools import setup, find_packages

setup(
    name="order-browser",
    version="1.0.0",
    description="Order record browser: search, filter, sort, paginate and export orders",
    author="Alex",
    author_email="",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    package_data={"orderbrowser.config": ["*.yaml"]},
    include_package_data=True,
    python_requires=">=3.11",
    install_requires=[
        "pandas>=2.1.0",
        "openpyxl>=3.1.0",
        "python-dotenv>=1.0.0",
        "pyyaml>=6.0",
        "fastapi>=0.110.0",
        "pydantic>=2.5.0",
        "pydantic-settings>=2.1.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0.0",
            "pytest-cov>=4.1.0",
            "httpx>=0.26.0",
        ],
        "dev": [
            "pytest>=8.0.0",
            "pytest-cov>=4.1.0",
            "httpx>=0.26.0",
            "black>=24.1.0",
            "ruff>=0.2.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "orderbrowser-export=orderbrowser.cli:main",
        ],
    },
)
