import re
import subprocess

from setuptools import setup, find_packages

with open("README.md", "r") as f:
    long_description = f.read()


def fallback_version():
    """Read the version from pubsuffix/version.py"""
    with open("pubsuffix/version.py", "r") as f:
        match = re.search(r"^__version__ = '([^']+)'", f.read(), re.M)
    return match.group(1)


# Get version from "git describe" (requires releases to be tagged vX.Y.Z and
# initial commit to be tagged v0.0.0, both with annotated tags). Outside a
# tagged git checkout, use the version recorded in the package.
try:
    git_version = subprocess.check_output(
        ['git', 'describe', '--abbrev', '--dirty'],
        text=True,
        stderr=subprocess.DEVNULL,
    )
except (OSError, subprocess.CalledProcessError):
    version = fallback_version()
else:
    version_parts = git_version.strip().lstrip('v').split('-')
    version = version_parts[0]
    if len(version_parts) > 1:
        version += f".dev{version_parts[1]}+{version_parts[2]}"
    if len(version_parts) > 3:
        version += ".dirty"

setup(
    name="pubsuffix",
    version=version,
    author="Dominick C. Pastore",
    description="Domain name parser based on the Public Suffix List",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="GPL-3.0-or-later",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: GNU General Public License v3 or later "
        "(GPLv3+)",
        "Topic :: Internet :: Name Service (DNS)",
    ],

    packages=find_packages(include=["pubsuffix", "pubsuffix.*"]),
    package_data={
        "pubsuffix": ["data/public_suffix_list.dat"],
    },
    install_requires=[
        "requests",
        "importlib_metadata; python_version<'3.10'",
    ],
    python_requires=">=3.7",
    extras_require={
        "docs": ["sphinx"],
        "test": [
            "flake8",
            "pytest",
            "pytest-cov",
            "pytest-mock",
        ]
    },

    entry_points={
        "console_scripts": [
            "pubsuffix=pubsuffix.main:main",
        ],
    },
)
