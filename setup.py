import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="hrdups",
    version="0.3",
    author="hrdups authors",
    description="Hardlink (or remove) duplicate files.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    py_modules=[
        "contenthash",
        "dirpruner",
        "fileclass",
        "fileutils",
        "fsgenerators",
        "help",
        "hrdups",
        "hrerrors",
        "hrlogger",
        "mutator",
        "runcontext",
        "sizebuckets",
    ],
    python_requires=">=3.11",
    install_requires=[
        "xxhash",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["hrdups=hrdups:cli"],
    },
    classifiers=[
        "Programming Language :: Python :: 3.11",
        "License :: OSI Approved :: MIT License",
        "Operating System :: POSIX",
        "Topic :: System :: Filesystems",
        "Topic :: Utilities"
    ],
)
