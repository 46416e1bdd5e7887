# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="applog",
    version="0.1.0",
    description="Configurable logging facility with console and size-rotated file sinks",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["applog", "applog.*"]),
    python_requires=">=3.8",
    install_requires=[
        "colorlog>=6.0",  # Colored severity tag for console sinks
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
