"""Root of the nestmark exception hierarchy."""


class NestmarkError(Exception):
    """Base error for everything raised while compiling nestmark source."""
