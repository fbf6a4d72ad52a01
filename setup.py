#!/usr/bin/env python
from setuptools import setup

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

with open("VERSION", "r", encoding="utf-8") as fh:
    version = fh.read().strip()

setup(name='cvek',
      version=version,
      author='CVEK developers',
      description='CVEK: kernel library and tuning parameter selection for kernel ridge regression',
      long_description=long_description,
      long_description_content_type="text/markdown",
      classifiers=[
          "Programming Language :: Python :: 3",
          "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
          "Operating System :: OS Independent",
      ],
      packages=['cvek', 'cvek.num', 'cvek.kernel', 'cvek.core', 'cvek.selection', 'cvek.plot'],
      license='GPLv3',
      install_requires=[
             "numpy",
             "scipy>=1.8.0",
             "joblib",
             "matplotlib"
         ],
      extras_require={
          "test": ["pytest"],
      },
      python_requires=">=3.8",
      )
