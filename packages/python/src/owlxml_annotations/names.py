"""
Qualified names: a (namespace, local name) pair used for abbreviated IRIs.
"""

from __future__ import annotations
import re
from dataclasses import dataclass

from owlxml_annotations.errors import InvalidArgumentError


@dataclass(frozen=True)
class QualifiedName:
    """A namespace URI paired with a local name.

    Equality is structural and no case or whitespace normalization is
    applied.  The textual form is ``"{namespace}:{local_name}"``, i.e. the
    namespace URI itself (not a prefix) followed by the local name.
    """
    namespace: str
    local_name: str

    def __post_init__(self) -> None:
        _require_text(self.namespace, "Qualified name namespace")
        _require_text(self.local_name, "Qualified name local name")

    def expand(self) -> str:
        """Full IRI obtained by concatenating namespace and local name."""
        return f"{self.namespace}{self.local_name}"

    def __str__(self) -> str:
        return f"{self.namespace}:{self.local_name}"


# Anything outside the XML 1.0 Char production cannot appear in a document,
# not even as a character reference
_NON_XML_CHAR = re.compile("[^\t\n\r\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")


def require_xml_chars(value: str, what: str) -> None:
    """Reject text that no OWL/XML document could carry."""
    match = _NON_XML_CHAR.search(value)
    if match is not None:
        raise InvalidArgumentError(
            f"{what} contains U+{ord(match.group()):04X}, which XML cannot represent"
        )


def _require_text(value: object, what: str) -> None:
    if value is None:
        raise InvalidArgumentError(f"{what} must not be None")
    if not isinstance(value, str):
        raise InvalidArgumentError(f"{what} must be a string, got: {type(value).__name__}")
    if value == "":
        raise InvalidArgumentError(f"{what} must not be empty")
    require_xml_chars(value, what)
