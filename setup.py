# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="dirlines",
    version="0.1.0",
    description="Stream the lines of every file in a directory, in natural file order",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["dirlines", "dirlines.*"]),
    python_requires=">=3.8",
    install_requires=[
        "natsort>=8.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
        "Topic :: System :: Logging",
    ],
)
