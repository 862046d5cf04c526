#!/usr/bin/env python3

from setuptools import setup, find_packages

setup(
    name='musicbaran',
    version='0.2.0',
    description='Find download URLs for albums and tracks missing from a local music library',
    author='musicbaran',
    packages=find_packages(exclude=['tests', 'tests.*']),
    entry_points={
        'console_scripts': [
            'musicbaran=musicbaran.cli:main',
        ],
    },
    install_requires=[
        # HTML parsing
        'beautifulsoup4>=4.11.0',

        # Browser automation
        'camoufox>=0.3.0',
        'playwright>=1.40.0',

        # Retry and resilience
        'tenacity>=8.0.0',
    ],
    extras_require={
        'test': [
            'pytest>=7.0.0',
            'pytest-asyncio>=0.21.0',
        ],
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: Console',
        'Intended Audience :: End Users/Desktop',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Topic :: Multimedia :: Sound/Audio',
    ],
    python_requires='>=3.10',
)
