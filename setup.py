from setuptools import setup, find_packages

setup(
    name="cyclecomplete",
    version="1.0.0",
    description="Inline word completion cycling through words of the current document",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "PyQt5",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "cyclecomplete=cyclecomplete.main:main",
        ],
    },
)
