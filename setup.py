from io import open
from setuptools import find_packages, setup

with open("requirements.txt") as fp:
    install_requires = [line for line in fp.read().split('\n') if line.strip()]

with open('tests/test_requirements.txt') as fp:
    tests_require = [line for line in fp.read().split('\n') if line.strip()]

setup(
    name="spatial-euclidean",
    author="spatial-euclidean maintainers",
    description="Immutable 2D cartesian points with vector, matrix and XML interop",
    long_description=open("README.md", "r", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
    version='1.0.0',
    package_dir={"": "src"},
    packages=find_packages(where="src", exclude=["tests"]),
    include_package_data=True,
    install_requires=install_requires,
    tests_require=tests_require,
    extras_require={
        "test": tests_require,
    },
    entry_points={
        'console_scripts': [
            'spatial-euclidean=spatial_euclidean.cli:start',
        ]
    },
)
