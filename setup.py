# setup.py
from setuptools import setup, find_packages

setup(
    name="form-schema",               # the *distribution* name on PyPI
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),  # will find form_schema/
    python_requires=">=3.10",
    install_requires=["pandas"],      # tabular reporting + canonical DataFrame encoding
    include_package_data=True,        # so we can bundle the JSON schemas
    package_data={
        "form_schema.schemas": ["*.json"],
    },
    entry_points={
        "console_scripts": ["form-schema=form_schema.parser:main"],
    },
    description="Schema-driven validator that reports every violation in nested form data",
    author="Your Name",
    license="Creative Commons Attribution-NonCommercial-ShareAlike 4.0 International License",
)
