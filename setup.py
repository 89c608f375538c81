"""
Setup file for Terraform Tag Hunter.
Allows installation in development mode: pip install -e .
"""
from setuptools import setup, find_packages

setup(
    name="terraform-tag-hunter",
    version="1.0.0",
    description="Policy check for azurerm resources missing required tags in Terraform plans",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["tag_hunter"],
    python_requires=">=3.9",
    install_requires=[
        "jinja2",
    ],
    extras_require={
        "dev": [
            "pytest",
            "pytest-cov",
            "pytest-mock",
            "hypothesis",
        ],
    },
    entry_points={
        "console_scripts": [
            "tag-hunter=tag_hunter:main",
        ],
    },
)
