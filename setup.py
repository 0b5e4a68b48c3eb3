from setuptools import setup, find_packages

setup(
    name="valuecells",
    version="0.1",
    description="Named value cells with read/write transform pipelines and methods that are bound to their cell. Helper functions operate on the cell currently being defined, so that cells can be set up declaratively.",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    zip_safe=False,
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
)
