# setup.py
from setuptools import setup, find_packages

setup(
    name="statement-extractor",
    version="0.1.0",
    description="Extract, validate and categorize credit card statement transactions into CSV",
    packages=find_packages(include=["statement_extractor", "statement_extractor.*"]),
    python_requires=">=3.8",
    install_requires=[
        "click>=7.0",
        "pyyaml>=5.3",
        "python-dotenv>=0.19",
        "pdfplumber>=0.10",
        "xlsxwriter>=3.0",
    ],
    extras_require={
        "tests": [
            "pytest>=7.0",
            "openpyxl>=3.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "statement-extract=statement_extractor.cli:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
