#!/usr/bin/env python
"""
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

   http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

from setuptools import setup, find_packages

with open("VERSION") as version_fp:
    VERSION = version_fp.read().strip()

setup(
    name="collato",
    version=VERSION,
    description="Locale aware string collation with MongoDB collations",
    license="http://www.apache.org/licenses/LICENSE-2.0",
    packages=find_packages(exclude=["tests", "dist"]),
    install_requires=["pymongo>=3.4", "typing_extensions>=4.0"],
    extras_require={"icu": ["PyICU>=2.4"]},
    classifiers=["Development Status :: 3 - Alpha"])
