# setup.py
from setuptools import setup, find_packages

setup(
    name="mkstruct",
    version="0.1.0",
    description="Create folder and file structures from indented or tree-style text",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.8",
    install_requires=[
        "rich",  # Colored console output
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'mkstruct=mkstruct.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
