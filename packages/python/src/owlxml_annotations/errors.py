"""
Error taxonomy for the annotation model and its OWL/XML codec.

Both concrete errors subclass ``ValueError`` so callers that already guard
input handling with ``except ValueError`` keep working.
"""

from __future__ import annotations


class AnnotationError(ValueError):
    """Base class for every error raised by this package."""


class InvalidArgumentError(AnnotationError):
    """A constructor or operation received a missing or unusable argument."""


class MalformedDocumentError(AnnotationError):
    """An OWL/XML document does not describe a well-formed annotation."""
