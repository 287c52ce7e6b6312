"""Generator error types."""

from nestmark.errors import NestmarkError


class GenerationError(NestmarkError):
    """Raised when a tree cannot be turned into HTML."""


class InvalidSelectorChain(GenerationError):
    """A non-selector node ended up on the ancestor chain.

    The parser never produces such a tree, so this signals a bug in the
    caller rather than bad source.
    """

    def __init__(self, node: object):
        self.node = node
        super().__init__(f"Invalid selector chain: {type(node).__name__} is not a Selector")
