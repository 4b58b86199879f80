"""Dynamic arrays, sorted hashes, typed properties and a system version report."""

__version__ = "1.03"
__all__ = ["arrays", "hashes", "properties", "system_version"]