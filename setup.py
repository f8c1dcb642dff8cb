"""
setup.py

Установка движка треугольного Peg Solitaire.

Использование:
    pip install -e .            # движок, терминальная игра, Flask API
    pip install -e .[test]      # + pytest
"""

from setuptools import setup, find_packages

setup(
    name="peg_triangle",
    version="1.0.0",
    description="Rules engine for triangular peg solitaire",
    packages=find_packages(include=["core", "peg_io", "utils", "web"]),
    py_modules=["main"],
    python_requires=">=3.8",
    install_requires=[
        "flask>=2.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "peg-triangle=main:main",
        ],
    },
    zip_safe=False,
)
