from setuptools import setup, find_packages

setup(
    name="ride_distance",
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pandas>=2.0.0",
        "numpy>=1.24.0",
        "fitparse>=1.2.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "ride-distance=ride_distance.cli:main",
        ],
    },
    python_requires=">=3.8",
)
