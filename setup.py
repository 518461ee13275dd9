#!/usr/bin/env python3
"""
Setup script for siteconfig - site metadata for the blog generator.
"""

from setuptools import setup, find_packages
import os

# Read the contents of README file
this_directory = os.path.abspath(os.path.dirname(__file__))
with open(os.path.join(this_directory, 'README.md'), encoding='utf-8') as f:
    long_description = f.read()

setup(
    name='siteconfig',
    version='1.0.0',
    author='Iqbal Khan',
    author_email='iqbalyarkhan@icloud.com',
    description='Static site metadata consumed by the blog generator',
    long_description=long_description,
    long_description_content_type='text/markdown',
    url='https://iqbalyarkhan.github.io',
    packages=find_packages(exclude=['tests', 'tests.*']),
    classifiers=[
        'Development Status :: 5 - Production/Stable',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Topic :: Internet :: WWW/HTTP :: Site Management',
    ],
    python_requires='>=3.8',
    install_requires=[
        'PyYAML>=6.0',
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
            'pytest-cov>=4.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'siteconfig=siteconfig_pkg.cli:main',
        ],
    },
    keywords='static site, blog, configuration',
)
