import os.path

from setuptools import find_packages, setup


def read(fname):
    path = os.path.join(os.path.dirname(__file__), fname)
    with open(path, "r") as rfile:
        return rfile.read()


setup(
    name="funcbox",
    version="1.2.0",
    description="Functional programming helpers for containers and values",
    license="MIT",
    long_description=read("README.rst") + "\n\n" + read("HISTORY.rst"),
    long_description_content_type="text/x-rst",
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    install_requires=[],
    extras_require={
        "test": ["pytest>=7", "pytest-mock>=3"],
    },
    keywords=[
        "functional",
        "partial",
        "placeholder",
        "pipe",
        "fluent",
        "utilities",
    ],
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages("src"),
)
