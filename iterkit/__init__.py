"""Iterator helpers: intersperse, k-way merge, lazy group-by and chunking, grouping maps,
group maps, k smallest, a lazy buffer and function forms of common operations."""

__version__ = "0.1.0"