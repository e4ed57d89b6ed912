__author__ = 'robert'

from turtle_reader.generator.graph_generator import GraphGenerator
from turtle_reader.generator.prolog_generator import PrologGenerator
