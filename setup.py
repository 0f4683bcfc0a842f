"""
Installation setup for scrysearch
"""
import configparser
import pathlib

import setuptools

# Establish project directory
project_root: pathlib.Path = pathlib.Path(__file__).resolve().parent

# Read config details to determine version-ing
config_file = project_root.joinpath("scrysearch/resources/scrysearch.properties")
config = configparser.ConfigParser()
if config_file.is_file():
    config.read(str(config_file))


def read_requirements(file_name: str) -> list:
    """
    Use the requirements file, if able
    :param file_name: Requirements file next to this script
    :return: Requirement specifiers
    """
    requirements_file = project_root.joinpath(file_name)
    if not requirements_file.is_file():
        return []
    return [
        line.strip()
        for line in requirements_file.open(encoding="utf-8").readlines()
        if line.strip() and not line.startswith("#")
    ]


setuptools.setup(
    name="scrysearch",
    version=config.get("SCRYSEARCH", "version", fallback="0.1.0+fallback"),
    description="Typed Scryfall card search client behind a small static web server",
    long_description=project_root.joinpath("README.md").open(encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    license="MIT",
    classifiers=[
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python",
        "Framework :: AsyncIO",
        "Framework :: aiohttp",
    ],
    keywords=[
        "Card Games",
        "Collectible",
        "JSON",
        "MTG",
        "Scryfall",
        "Trading Cards",
        "Magic: The Gathering",
    ],
    python_requires=">=3.10",
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    package_data={
        "scrysearch": ["resources/*.properties", "resources/public/*"],
    },
    install_requires=read_requirements("requirements.txt"),
    extras_require={"test": read_requirements("requirements_test.txt")},
    entry_points={"console_scripts": ["scrysearch=scrysearch.__main__:main"]},
)
