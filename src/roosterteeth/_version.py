"""Version of the roosterteeth package.

Bump manually for releases; the value is also stamped into the User-Agent.
"""

__version__ = "0.2.0"
