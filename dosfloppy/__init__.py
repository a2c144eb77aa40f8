"""Building blocks for MS-DOS floppy tools: floppyd encoding, geometry, wildcards, locking and listings."""

__version__ = "0.1.0"

__all__ = [
    "attributes",
    "forceio",
    "geometry",
    "hashtable",
    "listing",
    "locking",
    "offsets",
    "protocol",
    "wildcard",
    "wire",
]