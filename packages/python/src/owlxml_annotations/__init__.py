"""
owlxml-annotations: OWL annotations and their OWL/XML codec

Annotation value model (IRIs, abbreviated IRIs, anonymous individuals and
literals), recursively annotatable annotations, and the canonical OWL/XML
encoding with on-the-fly namespace prefix minting.
"""

__version__ = "0.1.0"

from owlxml_annotations.errors import (
    AnnotationError,
    InvalidArgumentError,
    MalformedDocumentError,
)
from owlxml_annotations.names import QualifiedName
from owlxml_annotations.literals import PlainLiteral, TypedLiteral, RDFLiteral
from owlxml_annotations.model import (
    IRI,
    AbbreviatedIRI,
    AnonymousIndividual,
    LiteralValue,
    AnnotationValue,
    AnnotationProperty,
    Annotation,
    as_annotation_value,
)
from owlxml_annotations.namespaces import NamespaceContext
from owlxml_annotations.limits import (
    DEFAULT_CODEC_LIMITS,
    enforce_document_limits,
    resolve_limits,
)
from owlxml_annotations.owlxml import encode, decode, encode_literal, decode_literal
from owlxml_annotations.rdf_export import ConversionReport, to_jsonld, to_nquads
from owlxml_annotations.processor import AnnotationCodec
from owlxml_annotations.vocabulary import (
    RDF,
    RDFS,
    OWL,
    XSD,
    WELL_KNOWN_PREFIXES,
)

__all__ = [
    # Errors
    "AnnotationError",
    "InvalidArgumentError",
    "MalformedDocumentError",
    # Model
    "QualifiedName",
    "PlainLiteral",
    "TypedLiteral",
    "RDFLiteral",
    "IRI",
    "AbbreviatedIRI",
    "AnonymousIndividual",
    "LiteralValue",
    "AnnotationValue",
    "AnnotationProperty",
    "Annotation",
    "as_annotation_value",
    # Codec
    "NamespaceContext",
    "DEFAULT_CODEC_LIMITS",
    "enforce_document_limits",
    "resolve_limits",
    "encode",
    "decode",
    "encode_literal",
    "decode_literal",
    "AnnotationCodec",
    # RDF export
    "ConversionReport",
    "to_jsonld",
    "to_nquads",
    # Vocabulary
    "RDF",
    "RDFS",
    "OWL",
    "XSD",
    "WELL_KNOWN_PREFIXES",
]
