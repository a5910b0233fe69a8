from setuptools import setup, find_packages

setup(
    name="textsnip",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        # Config files and YAML patch lists
        "pyyaml",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "textsnip=textsnip.cli:main",
        ],
    },
    author="Uday Kanth",
    description="Locate text snippets by target and apply character-range patches to files.",
)
