"""touilledo — a to-do list kept as one JSON document in Redis."""

__version__ = "0.1.0"
