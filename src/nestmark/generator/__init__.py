from nestmark.generator.errors import GenerationError, InvalidSelectorChain
from nestmark.generator.html import HtmlGenerator, to_html

__all__ = ["to_html", "HtmlGenerator", "GenerationError", "InvalidSelectorChain"]
