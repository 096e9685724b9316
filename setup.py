# setup.py
from setuptools import setup, find_packages

setup(
    name="xlisp",
    version="0.3.0",
    description="A small namespaced Lisp with loop/recur, threading macros, futures and atoms",
    packages=find_packages(include=["xlisp", "xlisp.*"]),
    package_data={"xlisp": ["prelude/*.xlisp"]},
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
