#!/usr/bin/env python
# encoding: utf-8

from setuptools import setup

setup(name='wordle-filter',
      version='1.0',
      description="Interactive filter for narrowing down Wordle candidates",
      author="Von Welch",
      author_email="von@vwelch.com",
      packages=['WordleFilter'],
      python_requires='>=3.9',
      entry_points={
          'console_scripts': [
              'wordle-filter = WordleFilter.wordle:main'
          ]
      },
      install_requires=['wordfreq'],
      extras_require={'test': ['pytest']},
      )
