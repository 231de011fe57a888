"""
Annotation value model.

An annotation pairs an :class:`AnnotationProperty` with an annotation value
and may carry one nested annotation describing itself, which may carry its
own, and so on.

Annotation values form a closed sum type of four variants:

    IRI                  full resource identifier
    AbbreviatedIRI       qualified name (namespace + local name)
    AnonymousIndividual  blank-node reference
    LiteralValue         plain or typed literal

Every variant exposes a ``kind`` tag equal to the OWL/XML element name it is
written as, so callers can branch on the tag or on ``isinstance``.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, ClassVar, Iterator, Optional, Union

from owlxml_annotations.errors import InvalidArgumentError
from owlxml_annotations.literals import PlainLiteral, RDFLiteral, TypedLiteral
from owlxml_annotations.names import QualifiedName, require_xml_chars
from owlxml_annotations.vocabulary import OWL_ANNOTATION_PROPERTY


# ── Annotation values ──────────────────────────────────────────────

@dataclass(frozen=True)
class IRI:
    """A full resource identifier."""
    resource: str
    kind: ClassVar[str] = "IRI"

    def __post_init__(self) -> None:
        if not isinstance(self.resource, str) or not self.resource:
            raise InvalidArgumentError("IRI requires a non-empty resource identifier")
        require_xml_chars(self.resource, "IRI")

    def expand(self) -> str:
        return self.resource


@dataclass(frozen=True)
class AbbreviatedIRI:
    """An identifier written as a qualified name."""
    qname: QualifiedName
    kind: ClassVar[str] = "AbbreviatedIRI"

    def __post_init__(self) -> None:
        if not isinstance(self.qname, QualifiedName):
            raise InvalidArgumentError("AbbreviatedIRI requires a QualifiedName")

    def expand(self) -> str:
        return self.qname.expand()


@dataclass(frozen=True)
class AnonymousIndividual:
    """A blank-node reference, meaningful only within one document."""
    node_id: str
    kind: ClassVar[str] = "AnonymousIndividual"

    def __post_init__(self) -> None:
        if not isinstance(self.node_id, str) or not self.node_id:
            raise InvalidArgumentError("AnonymousIndividual requires a non-empty node ID")
        require_xml_chars(self.node_id, "Node ID")


@dataclass(frozen=True)
class LiteralValue:
    """A plain or typed literal."""
    literal: RDFLiteral
    kind: ClassVar[str] = "Literal"

    def __post_init__(self) -> None:
        if not isinstance(self.literal, (PlainLiteral, TypedLiteral)):
            raise InvalidArgumentError("Literal value requires a PlainLiteral or TypedLiteral")


AnnotationValue = Union[IRI, AbbreviatedIRI, AnonymousIndividual, LiteralValue]

_VALUE_TYPES = (IRI, AbbreviatedIRI, AnonymousIndividual, LiteralValue)


def as_annotation_value(value: Any) -> AnnotationValue:
    """Coerce a payload into an annotation value.

    Variants pass through; a bare :class:`QualifiedName` becomes an
    :class:`AbbreviatedIRI` and a bare literal becomes a
    :class:`LiteralValue`.  Strings are rejected because they are ambiguous
    between an IRI and a blank-node identifier.
    """
    if value is None:
        raise InvalidArgumentError("Annotation value must not be None")
    if isinstance(value, _VALUE_TYPES):
        return value
    if isinstance(value, QualifiedName):
        return AbbreviatedIRI(value)
    if isinstance(value, (PlainLiteral, TypedLiteral)):
        return LiteralValue(value)
    raise InvalidArgumentError(
        f"Unsupported annotation value type: {type(value).__name__}"
    )


# ── Annotation property ────────────────────────────────────────────

@dataclass(frozen=True)
class AnnotationProperty:
    """The predicate of an annotation, given as a full or abbreviated IRI."""
    identifier: Union[IRI, AbbreviatedIRI]

    def __post_init__(self) -> None:
        if not isinstance(self.identifier, (IRI, AbbreviatedIRI)):
            raise InvalidArgumentError(
                "Annotation property requires an IRI or an AbbreviatedIRI"
            )

    @classmethod
    def from_iri(cls, iri: str) -> AnnotationProperty:
        return cls(IRI(iri))

    @classmethod
    def from_qname(cls, qname: QualifiedName) -> AnnotationProperty:
        if qname is None:
            raise InvalidArgumentError("Annotation property qualified name must not be None")
        return cls(AbbreviatedIRI(qname))

    @property
    def is_abbreviated(self) -> bool:
        return isinstance(self.identifier, AbbreviatedIRI)

    @property
    def iri(self) -> str:
        """Full IRI of the property, expanding an abbreviated form."""
        return self.identifier.expand()

    def declaration_jsonld(self) -> dict[str, Any]:
        """Expanded JSON-LD node declaring this IRI an ``owl:AnnotationProperty``."""
        return {"@id": self.iri, "@type": [OWL_ANNOTATION_PROPERTY]}


# ── Annotation ─────────────────────────────────────────────────────

class Annotation:
    """A (property, value) statement, optionally annotated itself.

    ``annotation_property`` and ``value`` are fixed at construction.  The
    nested annotation is attached afterwards with :meth:`annotate`.  Nested
    annotations form a singly linked chain owned by the root; attaching an
    ancestor as its own descendant creates a cycle, which is not detected
    and must be avoided by callers.
    """

    __slots__ = ("_annotation_property", "_value", "_nested")

    def __init__(self, annotation_property: AnnotationProperty, value: Any) -> None:
        if annotation_property is None:
            raise InvalidArgumentError("Annotation property must not be None")
        if not isinstance(annotation_property, AnnotationProperty):
            raise InvalidArgumentError(
                f"Expected an AnnotationProperty, got: {type(annotation_property).__name__}"
            )
        self._annotation_property = annotation_property
        self._value = as_annotation_value(value)
        self._nested: Optional[Annotation] = None

    @property
    def annotation_property(self) -> AnnotationProperty:
        return self._annotation_property

    @property
    def value(self) -> AnnotationValue:
        return self._value

    @property
    def nested(self) -> Optional[Annotation]:
        return self._nested

    def annotate(self, other: Annotation) -> Annotation:
        """Attach ``other`` as the annotation of this one, replacing any previous.

        Returns ``self`` so calls can be chained.
        """
        if other is None:
            raise InvalidArgumentError("Nested annotation must not be None")
        if not isinstance(other, Annotation):
            raise InvalidArgumentError(
                f"Expected an Annotation, got: {type(other).__name__}"
            )
        self._nested = other
        return self

    def iter_chain(self) -> Iterator[Annotation]:
        """Yield this annotation, then its nested annotation, outermost first."""
        current: Optional[Annotation] = self
        while current is not None:
            yield current
            current = current._nested

    @property
    def depth(self) -> int:
        """Number of annotations in the chain, this one included."""
        return sum(1 for _ in self.iter_chain())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Annotation):
            return NotImplemented
        left: Optional[Annotation] = self
        right: Optional[Annotation] = other
        while left is not None and right is not None:
            if left is right:
                return True
            if (left._annotation_property != right._annotation_property
                    or left._value != right._value):
                return False
            left, right = left._nested, right._nested
        return left is None and right is None

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        nested = " nested=..." if self._nested is not None else ""
        return (
            f"Annotation(property={self._annotation_property.identifier!r}, "
            f"value={self._value!r}{nested})"
        )
