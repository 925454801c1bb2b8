"""Configuration for the numopt package."""

from setuptools import setup, find_packages


setup(
    name="numopt",
    version="0.1.0",
    description="Stochastic gradient and particle swarm optimizers for NumPy objective functions",
    python_requires=">=3.9",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    packages=find_packages(exclude=["scripts"]),
    zip_safe=False,
)
