from setuptools import setup, find_packages

setup(
    name="tba_data",
    version="0.1.0",
    packages=find_packages(where="src", exclude=["tests", "tests.*"]),
    package_dir={"": "src"},
    install_requires=[
        "pandas",
        "python-dotenv",
        "requests"
    ],
    extras_require={
        "tests": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "tba-data=tba_data.cli:main",
        ],
    },
    python_requires=">=3.8",
)
