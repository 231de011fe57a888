"""
AnnotationCodec: configured entry point for annotation serialization.

Bundles a default known-prefix table and decoding limits so callers do not
have to pass them on every call.
"""

from __future__ import annotations
from typing import Any, Mapping, Optional

from owlxml_annotations.limits import resolve_limits
from owlxml_annotations.literals import RDFLiteral
from owlxml_annotations.model import Annotation, AnnotationProperty, as_annotation_value
from owlxml_annotations.owlxml import decode, decode_literal, encode, encode_literal
from owlxml_annotations.rdf_export import Subject, ConversionReport, to_jsonld, to_nquads
from owlxml_annotations.vocabulary import WELL_KNOWN_PREFIXES


class AnnotationCodec:
    """OWL/XML annotation codec with a default prefix table and limits.

    ``namespaces`` defaults to :data:`WELL_KNOWN_PREFIXES`; pass an empty
    mapping to declare no prefixes at all.  Prefixes given to a single
    :meth:`encode` call are merged over the default table.
    """

    def __init__(
        self,
        namespaces: Optional[Mapping[str, str]] = None,
        limits: Optional[dict[str, Optional[int]]] = None,
    ):
        self._namespaces = dict(WELL_KNOWN_PREFIXES if namespaces is None else namespaces)
        self._limits = resolve_limits(limits)

    @property
    def namespaces(self) -> dict[str, str]:
        return dict(self._namespaces)

    @property
    def limits(self) -> dict[str, Optional[int]]:
        return dict(self._limits)

    # ── OWL/XML ──────────────────────────────────────────────────

    def encode(
        self,
        annotation: Annotation,
        namespaces: Optional[Mapping[str, str]] = None,
    ) -> str:
        """Serialize with the default prefix table plus ``namespaces``."""
        return encode(annotation, {**self._namespaces, **(namespaces or {})})

    def decode(self, xml_text: str) -> Annotation:
        """Parse OWL/XML text with this codec's limits."""
        return decode(xml_text, self._limits)

    def encode_literal(self, literal: RDFLiteral) -> str:
        return encode_literal(literal)

    def decode_literal(self, xml_text: str) -> RDFLiteral:
        return decode_literal(xml_text, self._limits)

    # ── RDF export ───────────────────────────────────────────────

    def to_jsonld(self, annotation: Annotation, subject: Subject) -> tuple[dict[str, Any], ConversionReport]:
        return to_jsonld(annotation, subject)

    def to_nquads(self, annotation: Annotation, subject: Subject) -> str:
        return to_nquads(annotation, subject)

    # ── Model helpers ────────────────────────────────────────────

    property_from_iri = staticmethod(AnnotationProperty.from_iri)
    property_from_qname = staticmethod(AnnotationProperty.from_qname)
    as_annotation_value = staticmethod(as_annotation_value)
