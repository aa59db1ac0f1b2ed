"""Custom exceptions for richtext2html."""


class RichText2HtmlError(Exception):
    """Base exception for richtext2html operations."""


class ParseError(RichText2HtmlError):
    """Error decoding a serialized document tree."""


class InvalidNodeError(RichText2HtmlError):
    """Node type not recognized while rendering in strict mode."""
