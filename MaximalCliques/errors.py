class InvalidArgument(ValueError):
    """
    Raised when a graph is constructed, mutated or queried with arguments
    outside its domain (negative vertex count, out-of-range vertex, self-loop).
    """
