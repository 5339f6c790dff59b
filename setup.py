"""
Allows installation via pip by navigating to this directory, and running "pip install ."
"""

from setuptools import setup, find_packages

setup(
    name="RocketDrag",
    version="1.0",
    author="The RocketDrag developers",
    packages=find_packages(include=["rocketdrag", "rocketdrag.*"]),
    package_data={"rocketdrag.tests": ["*.csv"]},
    install_requires=[
        "numpy>=1.20.1",
        "matplotlib",
        "scipy",
        "pandas",
        "openpyxl",
    ],
    extras_require={
        "test": ["pytest"],
        "docs": ["sphinx", "sphinx_rtd_theme"],
    },
    entry_points={
        "console_scripts": ["rocketdrag=rocketdrag.cli:main"],
    },
    description="Drag model comparison and CFD drag coefficient fitting for rocket airbrakes",
)
