"""Top-level package for the route tour.

Cities connected by bidirectional weighted routes, with a cheapest-route
query on top. The core lives in ``tour.graph``; ``tour.cli`` and
``tour.web`` are the interactive and HTTP front ends.
"""

__version__ = "0.1.0"
