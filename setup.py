from setuptools import setup, find_packages

setup(
    name="peperone",
    version="0.1.0",
    description="Minimal command line stopwatch with timers stored on disk",
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires=">=3.9",
    install_requires=[
        "PyYAML",  # config.yaml
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "peperone=peperone.cli:main"
        ]
    },
)
