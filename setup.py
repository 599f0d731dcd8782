# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="structural-patterns",
    version="1.0.0",
    description="Structural design pattern demonstrations: flyweight, proxy, composite, adapter, decorator, facade and bridge",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["structural_patterns*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "tests": [
            "pytest",
        ],
    },
    entry_points={
        'console_scripts': [
            'structural-patterns=structural_patterns.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
