import os

from setuptools import find_packages
from setuptools import setup


def get_version():
    basedir = os.path.dirname(__file__)
    with open(os.path.join(basedir, "src/semver_constraints/__version__.py")) as f:
        variables = {}
        exec(f.read(), variables)

        version = variables.get("__version__")
        if version:
            return version

    raise RuntimeError("No version info found.")


__version__ = get_version()

kwargs = dict(
    name="semver-constraints",
    license="MIT",
    version=__version__,
    description="Intersection and union of semantic version constraints.",
    long_description=open("README.rst").read(),
    long_description_content_type="text/x-rst",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.9",
    install_requires=[
        "platformdirs>=3.0.0,<5.0.0",
        "tomlkit>=0.11.4,<1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0.0,<9.0.0",
            "pytest-mock>=3.9.0,<4.0.0",
        ]
    },
    include_package_data=True,
    classifiers=[
        "Intended Audience :: Developers",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: Implementation :: CPython",
    ],
)


setup(**kwargs)
