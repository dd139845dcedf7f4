"""setup.py for zeck: Zeckendorf representation codec.

Pure Python; numpy handles bit packing and rich formats the CLI output.
"""

from setuptools import find_packages, setup

setup(
    name="zeck",
    version="0.1.0",
    description="Compress data by rewriting it as a sum of non-consecutive Fibonacci numbers",
    packages=find_packages(include=["zeck", "zeck.*"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.17",
        "rich",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "zeck = zeck.__main__:main",
        ],
    },
)
