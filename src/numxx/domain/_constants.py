"""Mathematical constants exposed at package level."""

import math

pi: float = math.pi
e: float = math.e
inf: float = math.inf
