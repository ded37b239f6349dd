# setup.py
from setuptools import setup, find_packages

setup(
    name="octree3d",
    version="1.0.0",
    description="Octree spatial index for 3D points with sphere queries",
    packages=find_packages(include=["octree3d", "octree3d.*"]),
    install_requires=[
        "numpy>=1.20.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
