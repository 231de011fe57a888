"""
OWL/XML codec for annotations.

Writes an :class:`~owlxml_annotations.model.Annotation` tree as the nested
``<Annotation>`` element of the OWL 2 XML serialization and reads it back.

Element order inside each ``<Annotation>`` is fixed on output::

    <Annotation>
      <Annotation>...</Annotation>      nested annotation, if any
      <AnnotationProperty IRI="..."/>   or abbreviatedIRI="prefix:local"
      <IRI>...</IRI>                    exactly one value element
    </Annotation>

The nested annotation is written before the property and value of its
parent, so prefixes minted for unregistered namespaces are numbered from the
innermost annotation outwards.  On input, child order is not significant
and element text is taken verbatim, surrounding whitespace included.
"""

from __future__ import annotations
import io
import logging
from typing import Mapping, Optional
from xml.etree.ElementTree import Element
from xml.sax.saxutils import escape

# Use defusedxml for parsing so entity expansion and external DTDs are refused
import defusedxml.ElementTree as ET
from defusedxml import DefusedXmlException

from owlxml_annotations.errors import InvalidArgumentError, MalformedDocumentError
from owlxml_annotations.limits import enforce_document_limits, resolve_limits
from owlxml_annotations.literals import PlainLiteral, RDFLiteral, TypedLiteral
from owlxml_annotations.model import (
    AbbreviatedIRI,
    Annotation,
    AnnotationProperty,
    AnnotationValue,
    AnonymousIndividual,
    IRI,
    LiteralValue,
)
from owlxml_annotations.names import QualifiedName
from owlxml_annotations.namespaces import NamespaceContext
from owlxml_annotations.vocabulary import XML_LANG

logger = logging.getLogger(__name__)

ANNOTATION_TAG = "Annotation"
PROPERTY_TAG = "AnnotationProperty"
VALUE_TAGS = (IRI.kind, AbbreviatedIRI.kind, AnonymousIndividual.kind, LiteralValue.kind)

_ATTRIBUTE_ENTITIES = {'"': "&quot;", "\n": "&#10;", "\r": "&#13;", "\t": "&#9;"}

# Namespace-prefix scopes of a parsed document, keyed by element
_Scopes = dict[Element, dict[str, str]]


# ═══════════════════════════════════════════════════════════════════
# ENCODING
# ═══════════════════════════════════════════════════════════════════

def encode(
    annotation: Annotation,
    namespaces: Optional[Mapping[str, str]] = None,
) -> str:
    """Serialize an annotation tree to OWL/XML text.

    Args:
        annotation: Root of the annotation chain.
        namespaces: Known ``prefix -> namespace URI`` pairs.  They are
            declared on the root element and used for abbreviated
            properties and values in those namespaces.  Abbreviated values
            in any other namespace get a locally declared ``q{N}`` prefix.

    Returns:
        The XML text, without declaration or indentation.

    Raises:
        InvalidArgumentError: If ``annotation`` is not an Annotation, or an
            abbreviated property uses a namespace missing from
            ``namespaces``.
    """
    if not isinstance(annotation, Annotation):
        raise InvalidArgumentError(
            f"Expected an Annotation, got: {type(annotation).__name__}"
        )
    context = NamespaceContext(namespaces)
    chain = list(annotation.iter_chain())

    # Bodies are rendered innermost first so minting follows
    # children-before-self order
    bodies = [
        _property_xml(node.annotation_property, context) + _value_xml(node.value, context)
        for node in reversed(chain)
    ]
    declarations = "".join(
        f' xmlns:{prefix}="{_escape_attribute(namespace)}"'
        for prefix, namespace in context.known.items()
    )

    # All start tags, then each body followed by its end tag; no recursion
    # per nesting level
    parts = [f"<{ANNOTATION_TAG}{declarations}>"]
    parts.extend(f"<{ANNOTATION_TAG}>" for _ in chain[1:])
    for body in bodies:
        parts.append(body)
        parts.append(f"</{ANNOTATION_TAG}>")
    logger.debug(
        "Encoded annotation chain of depth %d (%d prefixes minted)",
        len(chain), context.minted_count,
    )
    return "".join(parts)


def encode_literal(literal: RDFLiteral) -> str:
    """Serialize a single literal as a ``<Literal>`` element."""
    if not isinstance(literal, (PlainLiteral, TypedLiteral)):
        raise InvalidArgumentError(
            f"Expected a PlainLiteral or TypedLiteral, got: {type(literal).__name__}"
        )
    return _literal_xml(literal)


def _property_xml(prop: AnnotationProperty, context: NamespaceContext) -> str:
    identifier = prop.identifier
    if isinstance(identifier, AbbreviatedIRI):
        qname = identifier.qname
        prefix = context.resolve_for_property(qname.namespace)
        return _element_xml(PROPERTY_TAG, {"abbreviatedIRI": f"{prefix}:{qname.local_name}"})
    return _element_xml(PROPERTY_TAG, {"IRI": identifier.resource})


def _value_xml(value: AnnotationValue, context: NamespaceContext) -> str:
    if isinstance(value, IRI):
        return _element_xml(IRI.kind, text=value.resource)
    if isinstance(value, AbbreviatedIRI):
        qname = value.qname
        prefix, minted = context.resolve_for_value(qname.namespace)
        attributes = {f"xmlns:{prefix}": qname.namespace} if minted else {}
        return _element_xml(
            AbbreviatedIRI.kind, attributes, f"{prefix}:{qname.local_name}"
        )
    if isinstance(value, AnonymousIndividual):
        return _element_xml(AnonymousIndividual.kind, {"nodeID": value.node_id})
    if isinstance(value, LiteralValue):
        return _literal_xml(value.literal)
    raise InvalidArgumentError(f"Unsupported annotation value: {value!r}")


def _literal_xml(literal: RDFLiteral) -> str:
    if isinstance(literal, TypedLiteral):
        attributes = {"datatypeIRI": literal.datatype_iri}
    elif literal.language is not None:
        attributes = {"xml:lang": literal.language}
    else:
        attributes = {}
    return _element_xml(LiteralValue.kind, attributes, literal.value)


def _element_xml(
    tag: str,
    attributes: Optional[Mapping[str, str]] = None,
    text: Optional[str] = None,
) -> str:
    """Render a leaf element, using the ``<tag />`` form when it has no text."""
    rendered = "".join(
        f' {name}="{_escape_attribute(value)}"'
        for name, value in (attributes or {}).items()
    )
    if not text:
        return f"<{tag}{rendered} />"
    return f"<{tag}{rendered}>{_escape_text(text)}</{tag}>"


def _escape_text(text: str) -> str:
    # A raw CR would be folded into LF by any conforming parser
    return escape(text, {"\r": "&#13;"})


def _escape_attribute(value: str) -> str:
    return escape(value, _ATTRIBUTE_ENTITIES)


# ═══════════════════════════════════════════════════════════════════
# DECODING
# ═══════════════════════════════════════════════════════════════════

def decode(xml_text: str, limits: Optional[dict[str, Optional[int]]] = None) -> Annotation:
    """Parse OWL/XML text into an annotation tree.

    Prefixed names are resolved against the ``xmlns:`` declarations in
    scope at the element that uses them.  Language tags keep the casing
    found in the document.

    Raises:
        MalformedDocumentError: If the text is not well-formed XML or does
            not describe exactly one annotation chain.
        ValueError: If the document exceeds the size limit.
    """
    enforce_document_limits(xml_text, limits)
    max_depth = resolve_limits(limits)["max_annotation_depth"]
    root, scopes = _parse(xml_text)
    if _local_name(root.tag) != ANNOTATION_TAG:
        raise MalformedDocumentError(
            f"Expected <{ANNOTATION_TAG}> root element, got <{_local_name(root.tag)}>"
        )

    levels: list[tuple[AnnotationProperty, AnnotationValue]] = []
    current: Optional[Element] = root
    while current is not None:
        if max_depth is not None and len(levels) >= max_depth:
            raise MalformedDocumentError(
                f"Annotation nesting exceeds limit {max_depth}"
            )
        nested, prop_element, value_element = _split_children(current)
        levels.append((
            _read_property(prop_element, scopes),
            _read_value(value_element, scopes),
        ))
        current = nested

    depth = len(levels)
    result = Annotation(*levels.pop())
    while levels:
        result = Annotation(*levels.pop()).annotate(result)
    logger.debug("Decoded annotation chain of depth %d", depth)
    return result


def decode_literal(xml_text: str, limits: Optional[dict[str, Optional[int]]] = None) -> RDFLiteral:
    """Parse a standalone ``<Literal>`` element."""
    enforce_document_limits(xml_text, limits)
    root, _ = _parse(xml_text)
    if _local_name(root.tag) != LiteralValue.kind:
        raise MalformedDocumentError(
            f"Expected <{LiteralValue.kind}> root element, got <{_local_name(root.tag)}>"
        )
    return _read_literal(root)


def _parse(xml_text: str) -> tuple[Element, _Scopes]:
    """Parse text, recording the prefixes in scope at every element."""
    scopes: _Scopes = {}
    stack: list[dict[str, str]] = [{}]
    pending: dict[str, str] = {}
    root: Optional[Element] = None
    try:
        for event, item in ET.iterparse(
            io.StringIO(xml_text), events=("start-ns", "start", "end")
        ):
            if event == "start-ns":
                prefix, namespace = item
                pending[prefix] = namespace
            elif event == "start":
                scope = {**stack[-1], **pending} if pending else stack[-1]
                pending = {}
                stack.append(scope)
                scopes[item] = scope
                if root is None:
                    root = item
            else:
                stack.pop()
    except ET.ParseError as exc:
        raise MalformedDocumentError(f"Document is not well-formed XML: {exc}") from exc
    except DefusedXmlException as exc:
        raise MalformedDocumentError(f"Forbidden XML construct: {exc!r}") from exc
    if root is None:
        raise MalformedDocumentError("Document has no root element")
    return root, scopes


def _split_children(element: Element) -> tuple[Optional[Element], Element, Element]:
    nested: list[Element] = []
    properties: list[Element] = []
    values: list[Element] = []
    for child in element:
        name = _local_name(child.tag)
        if name == ANNOTATION_TAG:
            nested.append(child)
        elif name == PROPERTY_TAG:
            properties.append(child)
        elif name in VALUE_TAGS:
            values.append(child)
        else:
            raise MalformedDocumentError(f"Unexpected <{name}> inside <{ANNOTATION_TAG}>")

    if len(nested) > 1:
        raise MalformedDocumentError(
            f"<{ANNOTATION_TAG}> may contain at most one nested annotation, found {len(nested)}"
        )
    if not properties:
        raise MalformedDocumentError(f"<{ANNOTATION_TAG}> is missing <{PROPERTY_TAG}>")
    if len(properties) > 1:
        raise MalformedDocumentError(
            f"<{ANNOTATION_TAG}> has {len(properties)} <{PROPERTY_TAG}> elements"
        )
    if len(values) != 1:
        raise MalformedDocumentError(
            f"<{ANNOTATION_TAG}> must have exactly one value element, found {len(values)}"
        )
    return (nested[0] if nested else None), properties[0], values[0]


def _read_property(element: Element, scopes: _Scopes) -> AnnotationProperty:
    iri = element.get("IRI")
    abbreviated = element.get("abbreviatedIRI")
    if (iri is None) == (abbreviated is None):
        raise MalformedDocumentError(
            f"<{PROPERTY_TAG}> needs exactly one of the IRI and abbreviatedIRI attributes"
        )
    try:
        if iri is not None:
            return AnnotationProperty.from_iri(iri)
        return AnnotationProperty.from_qname(
            _resolve_qname(abbreviated, scopes[element], PROPERTY_TAG)
        )
    except InvalidArgumentError as exc:
        raise MalformedDocumentError(f"Invalid <{PROPERTY_TAG}>: {exc}") from exc


def _read_value(element: Element, scopes: _Scopes) -> AnnotationValue:
    name = _local_name(element.tag)
    try:
        if name == IRI.kind:
            return IRI(element.text or "")
        if name == AbbreviatedIRI.kind:
            return AbbreviatedIRI(
                _resolve_qname(element.text or "", scopes[element], name)
            )
        if name == AnonymousIndividual.kind:
            return AnonymousIndividual(element.get("nodeID") or "")
        return LiteralValue(_read_literal(element))
    except InvalidArgumentError as exc:
        raise MalformedDocumentError(f"Invalid <{name}>: {exc}") from exc


def _read_literal(element: Element) -> RDFLiteral:
    language = element.get(XML_LANG)
    datatype = element.get("datatypeIRI")
    if language is not None and datatype is not None:
        raise MalformedDocumentError(
            "<Literal> cannot carry both xml:lang and datatypeIRI"
        )
    text = element.text or ""
    try:
        if datatype is not None:
            return TypedLiteral(text, datatype)
        return PlainLiteral(text, language, normalize=False)
    except InvalidArgumentError as exc:
        raise MalformedDocumentError(f"Invalid <Literal>: {exc}") from exc


def _resolve_qname(text: str, scope: dict[str, str], where: str) -> QualifiedName:
    prefix, sep, local = text.partition(":")
    if not sep or not prefix or not local:
        raise MalformedDocumentError(f"{text!r} in <{where}> is not a prefixed name")
    namespace = scope.get(prefix)
    if namespace is None:
        raise MalformedDocumentError(f"Undeclared prefix {prefix!r} in <{where}>")
    return QualifiedName(namespace, local)


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1] if tag.startswith("{") else tag
