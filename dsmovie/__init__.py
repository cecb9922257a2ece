"""
DSMovie application package.

This package contains the movie and score services, the database layer they
persist through, and the HTTP API that exposes them.
"""

__version__ = "1.0.0"
