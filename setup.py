from setuptools import setup, find_packages

setup(
    name="four-in-a-row",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "gymnasium",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "four-in-a-row=four_in_a_row.interfaces.cli:main",
        ],
    },
)
