"""dagconfig: lookup layer over a deployment's Service/Relationship graph."""

__version__ = "0.1.0"
