# setup.py
from setuptools import setup, find_packages

setup(
    name="numvec",
    version="1.0.0",
    description="Fixed-dimension numeric vectors (Vector3d, N-dimensional Vector)",
    packages=find_packages(include=["numvec", "numvec.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.20.0",
        "numba>=0.55.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
)
