class LoadError(Exception):
    """Question source is unreachable, answered with a bad status, or holds an unusable payload."""
