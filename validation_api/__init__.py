"""
Request validation API.

A FastAPI service exposing POST /users, gated by a validation filter that
binds the JSON body, runs declarative field rules and short-circuits with
a problem response when anything fails.
"""

__version__ = "0.1.0"
