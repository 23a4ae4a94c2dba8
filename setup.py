import os
from setuptools import setup, find_namespace_packages


here = os.path.abspath(os.path.dirname(__file__))
about = {}
with open(os.path.join(here, "spark_bigquery", "__version__.py"), "r") as f:
    exec(f.read(), about)
# Load dependencies from txt
with open(os.path.join(here, "requirements.txt"), "r") as f:
    requirements = f.read().strip().split("\n")
with open(os.path.join(here, "requirements-test.txt"), "r") as f:
    requirements_test = f.read().strip().split("\n")


def main() -> dict:
    return _process_metadata(about)


def _process_metadata(about) -> dict:
    packages = find_namespace_packages(include=["spark_bigquery", "spark_bigquery.*"])
    metadata = dict(
        name=about["__title__"],
        version=about["__version__"],
        description=about["__description__"],
        packages=packages,
        install_requires=requirements,
        extras_require={"test": requirements_test},
        python_requires=">=3.8",
    )
    base_metadata = dict(
        author=about["__author__"],
        author_email=about["__author_email__"],
        license=about["__license__"],
        classifiers=[
            "Development Status :: 4 - Beta",
            "Intended Audience :: Developers",
            "Topic :: Software Development :: Libraries",
            "License :: OSI Approved :: Apache Software License",
            "Programming Language :: Python :: 3.8",
            "Programming Language :: Python :: 3.9",
            "Programming Language :: Python :: 3.10",
            "Programming Language :: Python :: 3.11",
            "Programming Language :: Python :: 3.12",
        ],
    )
    metadata.update(base_metadata)
    return metadata


if __name__ == "__main__":
    metadata = main()
    setup(**metadata)
