""" Setup
"""

from setuptools import setup, find_packages
from codecs import open
from os import path

here = path.abspath(path.dirname(__file__))

with open(path.join(here, "README.md"), encoding="utf-8") as f:
    long_description = f.read()


def _read_reqs(relpath):
    fullpath = path.join(path.dirname(__file__), relpath)
    with open(fullpath) as f:
        return [
            s.strip() for s in f.readlines() if (s.strip() and not s.startswith("#"))
        ]


REQUIREMENTS = _read_reqs("requirements.txt")
exec(open(path.join(here, "src/kmeans_parallel/version.py")).read())
setup(
    name="kmeans_parallel",
    version=__version__,
    description="Parallel K-Means clustering of 2-D points",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="",
    author_email="",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Topic :: Scientific/Engineering",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    # Note that this is a string of words separated by whitespace, not a list.
    keywords="kmeans clustering parallel",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    include_package_data=True,
    install_requires=REQUIREMENTS,
    extras_require={"test": ["pytest"]},
    entry_points={
        "console_scripts": ["kmeans-parallel=kmeans_parallel.run_kmeans:cli"],
    },
    python_requires=">=3.8",
)
