"""Public services portal package.

Holds the in-memory data store, the repositories layered over it, the
business use cases and the FastAPI interface.
"""
