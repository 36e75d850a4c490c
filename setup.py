import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="minimax",
    version="0.1.0",
    author="Jakob Stigenberg",
    description="Minimax search with alpha-beta pruning for two-player games.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/jakkes/AI_Projects",
    packages=setuptools.find_packages(include=["minimax", "minimax.*"]),
    classifiers=(
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ),
    install_requires=[
        "numpy>=1.20",
        "typed-argument-parser>=1.6",
    ],
    extras_require={
        "test": ["pytest>=6"],
    },
    python_requires=">=3.8, <4",
)

# Publish
# python setup.py sdist bdist_wheel
# twine upload dist/*
