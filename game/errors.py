class InvalidGuess(ValueError):
    """Raised when a peg sequence has the wrong length or an unknown color."""
