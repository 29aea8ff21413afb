"""
A setuptools based setup module.

See:
https://packaging.python.org/guides/distributing-packages-using-setuptools/
"""

import setuptools

PACKAGE_DATA = {
    "channelsystem": [
        "additional_definitions.yml",
        "schemas/*.json",
    ],
}

INSTALL_REQUIRES = [
    "attrs",
    "jsonschema",
    "numpy",
    "particle",
    "PyYAML",
]

EXTRAS_REQUIRE = {
    "test": [
        "pytest",
    ],
}


def long_description():
    """Parse long description from readme."""
    with open("README.md", "r") as readme_file:
        return readme_file.read()


setuptools.setup(
    name="channelsystem",
    version="0.0a1",
    author="The channelsystem developers",
    long_description=long_description(),
    long_description_content_type="text/markdown",
    package_dir={"": "src"},
    packages=setuptools.find_packages("src"),
    license="GPLv3 or later",
    python_requires=">=3.8",
    tests_require=["pytest"],
    install_requires=INSTALL_REQUIRES,
    extras_require=EXTRAS_REQUIRE,
    package_data=PACKAGE_DATA,
    include_package_data=True,
)
