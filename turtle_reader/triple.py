__author__ = 'robert'

from collections import namedtuple

#: Represents a simple "sentence" consisting of a subject, predicate and an object.
#: Each field holds a URI, a quoted literal or an abbreviated identifier (label:suffix).
Triple = namedtuple("Triple", ["subject", "predicate", "object"])
