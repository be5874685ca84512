"""
Argo Explorer

In-memory Argo float data store with a keyword-routed chat query engine,
delimited text export and a FastAPI HTTP layer.
"""

__version__ = "1.0.0"
