"""
Namespace prefix resolution for one OWL/XML encoding run.

Known prefixes come from the caller and are declared once on the root
element.  Namespaces the caller did not register are given a freshly
minted ``q{N}`` prefix, declared on the element that uses it.
"""

from __future__ import annotations
import logging
import re
from typing import Mapping, Optional

from owlxml_annotations.errors import InvalidArgumentError
from owlxml_annotations.names import require_xml_chars

logger = logging.getLogger(__name__)

MINTED_PREFIX = "q"

# NCName without the Unicode extensions, which is all prefixes ever need here
_PREFIX_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_.\-]*$")


class NamespaceContext:
    """Prefix table plus the minting counter of a single ``encode`` call.

    Minting is not deduplicated: every unregistered namespace encountered
    gets a new prefix, even if the same URI was minted before.  Instances
    are cheap and must not be shared between encode calls.
    """

    def __init__(self, known: Optional[Mapping[str, str]] = None) -> None:
        self._known: dict[str, str] = {}
        self._by_namespace: dict[str, str] = {}
        self._minted = 0
        for prefix, namespace in (known or {}).items():
            self._register(prefix, namespace)

    def _register(self, prefix: str, namespace: str) -> None:
        if not isinstance(prefix, str) or not _PREFIX_PATTERN.fullmatch(prefix):
            raise InvalidArgumentError(f"Invalid namespace prefix: {prefix!r}")
        if prefix.lower().startswith("xml"):
            raise InvalidArgumentError(f"Reserved namespace prefix: {prefix!r}")
        if not isinstance(namespace, str) or not namespace:
            raise InvalidArgumentError(
                f"Namespace for prefix {prefix!r} must be a non-empty string"
            )
        require_xml_chars(namespace, f"Namespace for prefix {prefix!r}")
        self._known[prefix] = namespace
        # First registration wins when two prefixes share a namespace
        self._by_namespace.setdefault(namespace, prefix)

    @property
    def known(self) -> dict[str, str]:
        """Registered ``prefix -> namespace`` pairs in declaration order."""
        return dict(self._known)

    @property
    def minted_count(self) -> int:
        return self._minted

    def lookup(self, namespace: str) -> Optional[str]:
        return self._by_namespace.get(namespace)

    def resolve_for_property(self, namespace: str) -> str:
        """Prefix for an abbreviated annotation property.

        Property abbreviations are written as attributes and can only use a
        prefix declared on the root, so the namespace must be registered.
        """
        prefix = self._by_namespace.get(namespace)
        if prefix is None:
            raise InvalidArgumentError(
                f"Namespace {namespace!r} has no registered prefix; "
                "abbreviated annotation properties require one"
            )
        return prefix

    def resolve_for_value(self, namespace: str) -> tuple[str, bool]:
        """Prefix for an abbreviated annotation value.

        Returns ``(prefix, minted)``.  When ``minted`` is true the caller
        must declare the prefix on the element being written.
        """
        prefix = self._by_namespace.get(namespace)
        if prefix is not None:
            return prefix, False
        self._minted += 1
        prefix = f"{MINTED_PREFIX}{self._minted}"
        logger.debug("Minted prefix %s for namespace %s", prefix, namespace)
        return prefix, True
