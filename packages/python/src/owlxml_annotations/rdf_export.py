"""
RDF export of annotation chains.

Maps an annotation attached to a subject onto RDF following the OWL 2
mapping to RDF graphs:

    subject  property  value .                  the annotated statement
    property rdf:type  owl:AnnotationProperty .  one per property used

and, for every nested annotation, a reified blank node::

    _:a rdf:type owl:Axiom ;            owl:Annotation below the first level
        owl:annotatedSource   subject ;  the previous reified node deeper down
        owl:annotatedProperty property ;
        owl:annotatedTarget   value ;
        nestedProperty        nestedValue .

The graph is produced as expanded JSON-LD; :func:`to_nquads` hands it to
PyLD for N-Quads output.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from pyld import jsonld

from owlxml_annotations.errors import InvalidArgumentError
from owlxml_annotations.literals import TypedLiteral
from owlxml_annotations.model import (
    AbbreviatedIRI,
    Annotation,
    AnnotationValue,
    AnonymousIndividual,
    IRI,
    LiteralValue,
)
from owlxml_annotations.vocabulary import (
    OWL_ANNOTATED_PROPERTY,
    OWL_ANNOTATED_SOURCE,
    OWL_ANNOTATED_TARGET,
    OWL_ANNOTATION,
    OWL_ANNOTATION_PROPERTY,
    OWL_AXIOM,
)

Subject = Union[str, IRI, AbbreviatedIRI, AnonymousIndividual]


@dataclass
class ConversionReport:
    """Report from an export operation."""
    success: bool
    annotations_converted: int = 0
    triples_output: int = 0
    warnings: list[str] = field(default_factory=list)


def to_jsonld(annotation: Annotation, subject: Subject) -> tuple[dict[str, Any], ConversionReport]:
    """Convert an annotation chain on ``subject`` to an expanded JSON-LD graph.

    Args:
        annotation: Root of the annotation chain.
        subject: The annotated resource: an IRI string (``"_:"`` prefixed
            for a blank node) or an IRI, AbbreviatedIRI or
            AnonymousIndividual value.

    Returns:
        Tuple of (``{"@graph": [...]}`` document, ConversionReport).
    """
    if not isinstance(annotation, Annotation):
        raise InvalidArgumentError(
            f"Expected an Annotation, got: {type(annotation).__name__}"
        )
    report = ConversionReport(success=True)
    nodes: dict[str, dict[str, Any]] = {}

    def _add(node_id: str, predicate: str, obj: Any) -> None:
        node = nodes.setdefault(node_id, {"@id": node_id})
        objects = node.setdefault(predicate, [])
        if obj not in objects:
            objects.append(obj)
            report.triples_output += 1

    chain = list(annotation.iter_chain())
    source_id = _subject_id(subject)
    root = chain[0]
    _add(source_id, root.annotation_property.iri, _object(root.value))
    _add(root.annotation_property.iri, "@type", OWL_ANNOTATION_PROPERTY)
    report.annotations_converted += 1

    taken: set[Optional[str]] = {source_id}
    for node in chain:
        taken.add(node.annotation_property.iri)
        taken.add(_object(node.value).get("@id"))
    reified_ids = _fresh_node_ids(len(chain) - 1, taken)
    for level, (annotated, nested) in enumerate(zip(chain, chain[1:])):
        node_id = reified_ids[level]
        _add(node_id, "@type", OWL_AXIOM if level == 0 else OWL_ANNOTATION)
        _add(node_id, OWL_ANNOTATED_SOURCE, {"@id": source_id})
        _add(node_id, OWL_ANNOTATED_PROPERTY, {"@id": annotated.annotation_property.iri})
        _add(node_id, OWL_ANNOTATED_TARGET, _object(annotated.value))
        _add(node_id, nested.annotation_property.iri, _object(nested.value))
        _add(nested.annotation_property.iri, "@type", OWL_ANNOTATION_PROPERTY)
        report.annotations_converted += 1
        source_id = node_id

    return {"@graph": list(nodes.values())}, report


def to_nquads(annotation: Annotation, subject: Subject) -> str:
    """Convert an annotation chain on ``subject`` to N-Quads."""
    doc, _ = to_jsonld(annotation, subject)
    return jsonld.to_rdf(doc, {"format": "application/n-quads"})


# ── Internal ───────────────────────────────────────────────────────

def _subject_id(subject: Subject) -> str:
    if isinstance(subject, str):
        if not subject:
            raise InvalidArgumentError("Subject must be a non-empty identifier")
        return subject
    if isinstance(subject, (IRI, AbbreviatedIRI)):
        return subject.expand()
    if isinstance(subject, AnonymousIndividual):
        return f"_:{subject.node_id}"
    raise InvalidArgumentError(f"Unsupported subject type: {type(subject).__name__}")


def _object(value: AnnotationValue) -> dict[str, Any]:
    if isinstance(value, (IRI, AbbreviatedIRI)):
        return {"@id": value.expand()}
    if isinstance(value, AnonymousIndividual):
        return {"@id": f"_:{value.node_id}"}
    if isinstance(value, LiteralValue):
        literal = value.literal
        if isinstance(literal, TypedLiteral):
            return {"@value": literal.value, "@type": literal.datatype_iri}
        if literal.language is not None:
            return {"@value": literal.value, "@language": literal.language}
        return {"@value": literal.value}
    raise InvalidArgumentError(f"Unsupported annotation value: {value!r}")


def _fresh_node_ids(count: int, taken: set[Optional[str]]) -> list[str]:
    """Blank node IDs for reified annotations that no subject or value uses."""
    ids: list[str] = []
    candidate = 0
    while len(ids) < count:
        node_id = f"_:annotation{candidate}"
        if node_id not in taken:
            ids.append(node_id)
        candidate += 1
    return ids
