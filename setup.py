"""Setup configuration for the PRD prompt template tool."""
from setuptools import setup, find_packages

setup(
    name="prd-prompts",
    version="0.1.0",
    package_dir={"": "src"},
    packages=find_packages("src"),
    include_package_data=True,
    package_data={
        "prd_prompts": ["templates/*.md"],
    },
    install_requires=[
        "click>=8.2.0",
        "rich>=10.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "prdprompt=prd_prompts.__main__:cli",
        ],
    },
    description="Fill-in-the-blank prompt templates for v0.dev prompts and PRDs for AI coding agents",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Documentation",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.10",
)
