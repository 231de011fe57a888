"""
Example 02: RDF Export
======================

Converts an annotated statement to the OWL 2 reification pattern as JSON-LD
and N-Quads.
"""

import json

from owlxml_annotations import AnnotationCodec, Annotation, AnnotationProperty, IRI, PlainLiteral
from owlxml_annotations.vocabulary import RDFS_COMMENT, RDFS_LABEL

codec = AnnotationCodec()

annotation = Annotation(
    AnnotationProperty.from_iri(RDFS_COMMENT),
    IRI("http://example.org/seeThis"),
).annotate(
    Annotation(AnnotationProperty.from_iri(RDFS_LABEL), PlainLiteral("reviewed", "en"))
)

# ── 1. JSON-LD ───────────────────────────────────────────────────

print("=== 1. JSON-LD ===\n")

doc, report = codec.to_jsonld(annotation, "http://example.org/Subject")
print(json.dumps(doc, indent=2))
print(f"\n  Annotations converted: {report.annotations_converted}")
print(f"  Triples: {report.triples_output}")

# ── 2. N-Quads ───────────────────────────────────────────────────

print("\n=== 2. N-Quads ===\n")

print(codec.to_nquads(annotation, "http://example.org/Subject"))
