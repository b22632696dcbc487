class InvalidInput(ValueError):
    """A request is missing a required field (title, concept) or is not an object."""
