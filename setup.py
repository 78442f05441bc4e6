# setup.py
from setuptools import setup, find_packages

setup(
    name="rainbowtree",
    version="1.2.0",
    description="Depth-colored connector lines and active-path focus for file-tree views",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.9",
    install_requires=[
        "customtkinter",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'rainbowtree=rainbowtree.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
