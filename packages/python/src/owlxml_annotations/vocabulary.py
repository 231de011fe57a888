"""Namespace constants for the vocabularies annotations are written against."""

from __future__ import annotations

# ── Namespace Constants ────────────────────────────────────────────

RDF = "http://www.w3.org/1999/02/22-rdf-syntax-ns#"
RDFS = "http://www.w3.org/2000/01/rdf-schema#"
OWL = "http://www.w3.org/2002/07/owl#"
XSD = "http://www.w3.org/2001/XMLSchema#"
XML = "http://www.w3.org/XML/1998/namespace"
DC = "http://purl.org/dc/elements/1.1/"
DCTERMS = "http://purl.org/dc/terms/"
SKOS = "http://www.w3.org/2004/02/skos/core#"

# Prefixes conventionally bound in ontology documents.  ``xml`` is
# implicitly bound by every XML processor and is never re-declared.
WELL_KNOWN_PREFIXES: dict[str, str] = {
    "owl": OWL,
    "rdfs": RDFS,
    "rdf": RDF,
    "xsd": XSD,
}

# ── Terms ──────────────────────────────────────────────────────────

RDF_TYPE = f"{RDF}type"
RDFS_COMMENT = f"{RDFS}comment"
RDFS_LABEL = f"{RDFS}label"
RDFS_SEE_ALSO = f"{RDFS}seeAlso"
OWL_AXIOM = f"{OWL}Axiom"
OWL_ANNOTATION = f"{OWL}Annotation"
OWL_ANNOTATION_PROPERTY = f"{OWL}AnnotationProperty"
OWL_ANNOTATED_SOURCE = f"{OWL}annotatedSource"
OWL_ANNOTATED_PROPERTY = f"{OWL}annotatedProperty"
OWL_ANNOTATED_TARGET = f"{OWL}annotatedTarget"
XSD_STRING = f"{XSD}string"
XML_LANG = f"{{{XML}}}lang"
