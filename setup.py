"""
setup.py

Установка анимации Ханойской башни.

Использование:
    pip install -e .            # установка для разработки
    pip install -e ".[test]"    # вместе с pytest
"""

from setuptools import setup, find_packages

setup(
    name="tower_of_hanoi",
    version="1.0.0",
    description="Animated Tower of Hanoi for truecolor terminals",
    packages=find_packages(include=["core", "core.*", "hanoi_io", "hanoi_io.*",
                                    "solvers", "solvers.*", "solutions", "solutions.*",
                                    "utils", "utils.*"]),
    py_modules=["main"],
    python_requires=">=3.8",
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "tower-of-hanoi=main:main",
        ],
    },
    zip_safe=False,
)
