from setuptools import setup
from codecs import open
from os import path
from apihttp import __version__ as pkg_version, __author__ as pkg_author, __license__ as pkg_license

# Load the README file for use in the long description
local_dir = path.abspath(path.dirname(__file__))
with open(path.join(local_dir, "README.rst"), encoding="utf-8") as f:
  long_description = f.read()

requires = [
  "requests",
]

tests_requires = [
  "nose2",
  "nose2[coverage_plugin]",
]

extras_require = {
  "test": tests_requires,
  "lint": ["pylint"],
  "build": ["pynt"],
}

setup(
  name="apihttp",
  version=pkg_version,
  description="HTTP request/response records for API client libraries",
  long_description=long_description,
  author=pkg_author,
  license=pkg_license,
  classifiers=[
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "License :: OSI Approved :: Apache Software License",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3.9",
    "Topic :: Internet :: WWW/HTTP",
    "Operating System :: MacOS :: MacOS X",
    "Operating System :: Microsoft :: Windows",
    "Operating System :: Unix",
  ],
  keywords="http api client cache-control",
  packages=["apihttp"],
  python_requires=">=3.9",
  install_requires=requires,
  extras_require=extras_require,
)
