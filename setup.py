from setuptools import setup, find_packages

setup(
    name="xml-score",
    version="0.1.0",
    description="Convert XML documents to JSON and add the summed match score",
    author="Your Name",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=[
        "typer>=0.9",
        "rich>=13.0",
        "python-dotenv>=1.0",
        "structlog>=23.1",
        "pydantic>=2.0",
        "pydantic-settings>=2.0",
        "pyyaml>=6.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "xml-score=xml_score.cli:app"
        ]
    },
    python_requires=">=3.9",
    include_package_data=True,
)
