"""
Example 01: Annotation Round Trip
=================================

Builds a nested annotation, writes it as OWL/XML and reads it back.

Use case: attaching provenance to an rdfs:comment in an ontology editor.
"""

from owlxml_annotations import (
    AnnotationCodec,
    Annotation,
    AnnotationProperty,
    IRI,
    PlainLiteral,
    QualifiedName,
    TypedLiteral,
)
from owlxml_annotations.vocabulary import DCTERMS, RDFS, RDFS_COMMENT, XSD

codec = AnnotationCodec()

# ── 1. Build a nested annotation ─────────────────────────────────

print("=== 1. Nested Annotation ===\n")

comment = Annotation(
    AnnotationProperty.from_iri(RDFS_COMMENT),
    PlainLiteral("Body temperature in degrees Celsius", "en"),
)
comment.annotate(
    Annotation(
        AnnotationProperty.from_qname(QualifiedName(DCTERMS, "source")),
        QualifiedName("http://example.org/clinical#", "VitalSignsGuide"),
    ).annotate(
        Annotation(
            AnnotationProperty.from_qname(QualifiedName(DCTERMS, "date")),
            TypedLiteral("2024-03-01", f"{XSD}date"),
        )
    )
)

for level, node in enumerate(comment.iter_chain()):
    print(f"  {'  ' * level}{node.annotation_property.iri} -> {node.value}")

# ── 2. Encode ────────────────────────────────────────────────────

print("\n=== 2. OWL/XML ===\n")

xml_text = codec.encode(comment, {"dcterms": DCTERMS})
print(f"  {xml_text}")

# ── 3. Decode ────────────────────────────────────────────────────

print("\n=== 3. Decode ===\n")

decoded = codec.decode(xml_text)
print(f"  Depth: {decoded.depth}")
print(f"  Equal to original: {decoded == comment}")

# ── 4. Unregistered property namespace ───────────────────────────

print("\n=== 4. Unregistered Property Namespace ===\n")

try:
    AnnotationCodec(namespaces={}).encode(
        Annotation(AnnotationProperty.from_qname(QualifiedName(RDFS, "label")), IRI("http://example.org/x"))
    )
except ValueError as e:
    print(f"  ✗ Rejected: {e}")
