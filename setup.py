#!/usr/bin/env python3

from setuptools import setup, find_packages

requires = [
    "discord.py (>=2.0,<3.0)",
    "sqlalchemy (>=1.4,<3.0)",
]

extras = {
    "postgres": ["psycopg2-binary (>=2.7,<3.0)"],
    "test": ["pytest (>=7.0)"],
}

setup(name='calcbot',
      version='1.0.0',
      description='Mathematical expression evaluator and discord calculator bot',
      author='BHodges',
      python_requires='>=3.8',
      install_requires=requires,
      extras_require=extras,
      entry_points={
          'console_scripts': [
              'calcbot=calcbot.__main__:run',
              'calc=calcbot.equations.__main__:run',
          ],
      },
      packages=find_packages(exclude=['tests']))
