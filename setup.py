from setuptools import setup, find_packages

setup(
    name="mutationgrader",
    version="1.0.0",
    description="Grade student test suites from mutation testing results",
    license="MIT",
    packages=find_packages(include=["mutationgrader", "mutationgrader.*"]),
    install_requires=[
        "pyyaml>=6.0",
        "jsonschema>=4.20.0",
        "click>=8.1.7",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
        ],
    },
    entry_points={
        "console_scripts": [
            "mutationgrader=mutationgrader.cli:main",
        ],
    },
    python_requires=">=3.8",
)
