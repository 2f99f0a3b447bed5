#!/usr/bin/python
from setuptools import setup

from resumable import __version__ as version

setup(
    name='resumable',
    version=version,
    description='''
        Step-by-step resumable coroutines on top of plain generators,
        with a shared input cell for two-way data passing.
    ''',
    long_description=open('README.txt').read(),
    author='Maries Ionel Cristian',
    author_email='ionel.mc@gmail.com',
    packages=['resumable', 'resumable.core'],
    zip_safe=True,
    python_requires='>=3.6',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Libraries :: Python Modules',
    ],
    install_requires=[],
)
