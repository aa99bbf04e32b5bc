import codecs
import os
import re
from io import open
from os import path

from setuptools import find_packages, setup


def read_requirements(path):
    with open(path, "r") as f:
        requirements = f.read().splitlines()
        processed_requirements = []

        for req in requirements:
            req = req.strip()
            if not req or req.startswith("#"):
                continue
            processed_requirements.append(req)
        return processed_requirements


here = path.abspath(path.dirname(__file__))
requirements = read_requirements(path.join(here, "requirements.txt"))

with open(path.join(here, "README.md"), encoding="utf-8") as f:
    long_description = f.read()

# loading version from the package
with codecs.open(
    os.path.join(here, "MaximalCliques/__init__.py"), encoding="utf-8"
) as init_file:
    version_match = re.search(r"^version = ['\"]([^'\"]*)['\"]", init_file.read(), re.M)
    version_string = version_match.group(1)

setup(
    name="MaximalCliques",
    version=version_string,
    description="Maximal clique enumeration with the pivoted Bron-Kerbosch algorithm",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    license="MIT",
    python_requires=">=3.10",
    install_requires=requirements,
    extras_require={"test": ["pytest"]},
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3.12",
        "Topic :: Scientific/Engineering",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
