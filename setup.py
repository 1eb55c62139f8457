#!/usr/bin/python -u
# setup.py
# build command : python setup.py build
from setuptools import setup, find_packages

name = 'superDFITS'
version = '1.0.0'

setup( name = name,
  version=version,
  description='superDFITS FITS header dump and keyword sort tools',
  author='Craig Warner',
  packages=find_packages(exclude=['tests']),
  install_requires=['numpy>=1.0'],
  extras_require={'test': ['pytest', 'astropy']},
  zip_safe = False,
  scripts=['superDFITS/dfits.py', 'superDFITS/fitsort.py']
  )
