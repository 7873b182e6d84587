"""
Café catalog and query handling.

Responsibilities:
- Build the immutable city -> café names catalog at startup.
- Parse and validate raw query parameters into a typed query.
- Filter by name substring, then truncate to the requested count.
- Render the selection as a comma-separated list.
"""
