# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="photoindex",
    version="0.1.0",
    description="Persistent index of image folders with a bounded directory scanner",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["photoindex", "photoindex.*"]),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        'console_scripts': [
            'photoindex=photoindex.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
