"""Server-rendered web frontend."""
