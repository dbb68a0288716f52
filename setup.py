import sys
from pathlib import Path

from setuptools import setup, find_namespace_packages

if sys.version_info[0:2] < (3, 9):
    raise RuntimeError("This package requires Python 3.9+.")

setup(
    name="moat-lib-flexspeed",
    use_scm_version={
        "version_scheme": "guess-next-dev",
        "local_scheme": "dirty-tag",
        "fallback_version": "0.1.0",
    },
    packages=find_namespace_packages(include=["moat.*"]),
    url="https://github.com/M-o-a-T/moat",
    license="MIT",
    author="Matthias Urlichs",
    author_email="<matthias@urlichs.de>",
    description="A 10-bit speed codec with adaptive precision",
    long_description=Path(__file__).with_name("README.rst").read_text(encoding="utf-8"),
    setup_requires=["setuptools_scm"],
    tests_require=["pytest"],
    install_requires=[],
    extras_require={"test": ["pytest"]},
    python_requires=">=3.9",
    classifiers=[
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "License :: OSI Approved",
    ],
)
