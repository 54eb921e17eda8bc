import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()


setuptools.setup(
    name="procmaps",
    version="0.0.1",
    author="Tony Simpson",
    author_email="agjasimpson@gmail.com",
    description="Parser for Linux /proc/<pid>/maps and /proc/<pid>/smaps.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/tonysimpson/procmaps",
    install_requires=["intervaltree"],
    extras_require={"test": ["pytest"]},
    tests_require=['pytest'],
    python_requires=">=3.7",
    packages=setuptools.find_packages(exclude=["tests", "examples"]),
    classifiers=(
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: POSIX :: Linux",
    )
)
