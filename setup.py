import os
import setuptools
import subprocess

# used if the version cannot be derived from git tags (e.g., for a source checkout without tags)
FALLBACK_VERSION = "0.1.0"


def read_readme():
    with open("README.md", "r", encoding="utf-8") as fh:
        readme = fh.read()
    return readme


def read_version():
    """Read a version string.

    Git tags of the following formats are supported:

    1.0.0
    1.0.0-beta
    v1.0.0
    v1.0.0-beta

    Version strings need to comply with PEP 440. For development versions the build number is
    appended; to comply with PEP 440 everything after the first dash is removed before.
    Without git or without tags, `FALLBACK_VERSION` is used.
    """
    try:
        git_describe = subprocess.run(
            ["git", "describe", "--tags", "--abbrev=0"],
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
        )
    except FileNotFoundError:  # git is not installed
        return FALLBACK_VERSION

    if git_describe.returncode != 0:
        return FALLBACK_VERSION
    git_version = git_describe.stdout.strip().decode("utf-8")

    head_is_tag = (
        subprocess.run(
            ["git", "describe", "--tags", "--exact-match", "HEAD"],
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
        ).returncode
        == 0
    )
    if not head_is_tag:
        build_nr = os.environ.get("BUILD_NUMBER", 0)
        next_stable = git_version.split("-")[0]
        git_version = f"{next_stable}.dev{build_nr}"

    if git_version[0] == "v":
        git_version = git_version[1:]

    return git_version


setuptools.setup(
    name="phragmen",
    version=read_version(),
    description="Sequential Phragmen elections with voter budgets, loads and edge weights",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
    license="MIT License",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Intended Audience :: Science/Research",
    ],
    packages=["phragmen"],
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.20",
        "networkx>=2.2",
        "ruamel.yaml >= 0.16.13",
        "prefsampling>=0.1.16",
    ],
    extras_require={
        "gmpy2": [
            "gmpy2>=2.1",
        ],
        "test": [
            "pytest>=6",
        ],
        "dev": [
            "pytest>=6",
            "coverage[toml]>=5.3",
            "black==22.1.0",
        ],
    },
)
