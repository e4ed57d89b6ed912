from setuptools import setup, find_packages
import os

version = '0.1'


def readme():
    dirname = os.path.dirname(os.path.abspath(__file__))
    filename = os.path.join(dirname, "README.txt")
    with open(filename) as f:
        return f.read()

setup(name='turtleReader',
      version=version,
      description="A reader for a subset of the turtle notation, with graph and prolog generators",
      long_description=readme(),
      # Get strings from http://pypi.python.org/pypi?%3Aaction=list_classifiers
      classifiers=[],
      keywords='rdf turtle rdflib prolog',
      author='Robert Engsterhold',
      author_email='engsterhold@me.com',
      url='',
      license='BSD',
      packages=find_packages(exclude=['ez_setup', 'examples', 'tests', 'tests.*']),
      include_package_data=True,
      zip_safe=False,
      python_requires='>=3.7',
      install_requires=[
          'requests',
          'rdflib>=6.0'
      ],
      extras_require={
          'test': ['pytest'],
      },

      entry_points="""
          [rdf.plugins.parser]
          turtlelite = turtle_reader.rdflib_parser:TurtleLiteParser

          [console_scripts]
          turtle-reader = turtle_reader.cli:main
      """,
      )
