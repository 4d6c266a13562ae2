#!/usr/bin/env python

from setuptools import find_packages, setup

setup(
        name='twitter-media',
        version='0.1.0',
        description='Twitter media attachment records and their JSON mapping.',
        packages=find_packages(exclude=['tests', 'tests.*']),
        classifiers=[
            'License :: OSI Approved :: MIT License',
            'Programming Language :: Python :: 3',
            'Operating System :: OS Independent',
            'Development Status :: 3 - Alpha',
            'Topic :: Internet :: WWW/HTTP :: Dynamic Content',
            'Intended Audience :: Developers'
        ],
        install_requires=[
            'fastjsonschema'
        ],
        extras_require={
            'test': ['pytest']
        },
        python_requires='>=3.8'
)
