""" weierstrass build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import weierstrass

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=weierstrass.name,
    version=weierstrass.__version__,
    license=weierstrass.__license__,
    author=weierstrass.__author__,
    author_email=weierstrass.__author_email__,
    description="Points arithmetic on general Weierstrass curves over the reals",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=["dataclasses-json"],
    extras_require={"test": ["pytest"]},
    keywords=(
        "elliptic-curves weierstrass chord-tangent point-addition "
        "point-doubling geometry algebra education"
    ),
    python_requires=">=3.8",
    classifiers=[
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
