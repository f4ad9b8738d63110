from setuptools import setup, find_packages
import os


with open(os.path.join("parentage", "version.py")) as f:
    version = f.read().split("=")[1].strip().strip("'").strip('"')

with open("requirements.txt", "r") as f:
    requirements = [line.strip() for line in f if line.strip() and not line.startswith("#")]


setup(
    name='parentage',
    version=version,
    packages=find_packages(where=".", include=["parentage", "parentage.*"]),
    description="Python package to keep parent/child relationships between records consistent",
    author="Openergy development team",
    author_email="contact@openergy.fr",
    long_description=open('README.md').read(),
    long_description_content_type="text/markdown",
    install_requires=requirements,
    classifiers=[
        "Programming Language :: Python",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Natural Language :: English",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Libraries",
    ],
    extras_require={
        "test": [
            'pytest',
            'pytest-cov',
        ]
    },
    include_package_data=True
)
