"""Boundary generation utilities."""

import secrets

# RFC 2046 section 5.1.1
MAX_BOUNDARY_LENGTH = 70
DEFAULT_BOUNDARY_PREFIX = "=_mailwright_"


def generate_boundary(prefix: str = DEFAULT_BOUNDARY_PREFIX, length: int = 24) -> str:
    """
    Generate a random multipart boundary.

    Args:
        prefix: Fixed leading text of the boundary
        length: Number of random hex characters appended to the prefix

    Returns:
        Boundary string (without quotes or leading dashes)

    Raises:
        ValueError: If length is not positive or the boundary would exceed
            70 characters

    Examples:
        >>> len(generate_boundary("b_", 8))
        10
    """
    if length < 1:
        raise ValueError("Boundary length must be positive")

    boundary = prefix + secrets.token_hex((length + 1) // 2)[:length]

    if len(boundary) > MAX_BOUNDARY_LENGTH:
        raise ValueError(f"Boundary exceeds {MAX_BOUNDARY_LENGTH} characters: {boundary}")

    return boundary
