"""
Resource limits applied to OWL/XML documents before and during decoding.

Every limit is off by default, so anything :func:`~owlxml_annotations.owlxml.encode`
writes can be decoded again.  Callers reading untrusted documents should
set both.
"""

from __future__ import annotations
import logging
from typing import Any, Optional

logger = logging.getLogger(__name__)

# None disables a limit
DEFAULT_CODEC_LIMITS: dict[str, Optional[int]] = {
    "max_document_size": None,     # characters of XML text
    "max_annotation_depth": None,  # annotations in one chain
}


def resolve_limits(limits: Optional[dict[str, Optional[int]]] = None) -> dict[str, Optional[int]]:
    """Merge caller overrides onto :data:`DEFAULT_CODEC_LIMITS`."""
    resolved = {**DEFAULT_CODEC_LIMITS, **(limits or {})}
    for key, value in resolved.items():
        if key not in DEFAULT_CODEC_LIMITS:
            raise ValueError(f"Unknown codec limit: {key}")
        if value is None:
            continue
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"Limit {key} must be an integer, got: {type(value).__name__}")
        if value < 1:
            raise ValueError(f"Limit {key} must be positive, got: {value}")
    return resolved


def enforce_document_limits(
    document: Any,
    limits: Optional[dict[str, Optional[int]]] = None,
) -> None:
    """Validate raw document text against size limits before parsing."""
    if document is None:
        raise TypeError("Document must not be None")
    if not isinstance(document, str):
        raise TypeError(f"Document must be a str, got: {type(document).__name__}")
    max_size = resolve_limits(limits)["max_document_size"]
    if max_size is not None and len(document) > max_size:
        raise ValueError(f"Document size {len(document)} exceeds limit {max_size}")
    logger.debug("Document of %d characters within limits", len(document))
