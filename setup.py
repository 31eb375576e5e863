from setuptools import find_packages, setup

setup(
    name="seqfn",
    version="0.1.0",
    description="Functional helpers over sequences and mappings",
    python_requires=">=3.10",
    packages=find_packages(include=["seqfn", "seqfn.*"]),
    extras_require={
        "test": ["pytest"],
    },
)
