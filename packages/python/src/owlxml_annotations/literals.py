"""
Literal primitives carried by annotation values.

A literal is either *plain* (text with an optional language tag) or
*typed* (text with a datatype IRI).  The two shapes are distinct classes,
so a literal can never carry both a language and a datatype.
"""

from __future__ import annotations
from dataclasses import InitVar, dataclass
from typing import Optional, Union

from owlxml_annotations.errors import InvalidArgumentError
from owlxml_annotations.names import require_xml_chars
from owlxml_annotations.vocabulary import XSD


@dataclass(frozen=True)
class PlainLiteral:
    """Text with an optional language tag.

    The language tag is upper-cased on construction.  Pass
    ``normalize=False`` to keep the tag exactly as given; the OWL/XML
    decoder does so to preserve the casing found in the source document.
    """
    value: str = ""
    language: Optional[str] = None
    normalize: InitVar[bool] = True

    def __post_init__(self, normalize: bool) -> None:
        if self.value is None:
            raise InvalidArgumentError("Literal value must not be None")
        if not isinstance(self.value, str):
            raise InvalidArgumentError(
                f"Literal value must be a string, got: {type(self.value).__name__}"
            )
        require_xml_chars(self.value, "Literal value")
        if self.language is not None:
            if not isinstance(self.language, str):
                raise InvalidArgumentError(
                    f"Language tag must be a string, got: {type(self.language).__name__}"
                )
            require_xml_chars(self.language, "Language tag")
            if self.language == "":
                # An empty tag is the same as no tag
                object.__setattr__(self, "language", None)
            elif normalize:
                object.__setattr__(self, "language", self.language.upper())

    def to_swrl_string(self) -> str:
        if self.language is None:
            return f'"{self.value}"'
        return f'"{self.value}"@{self.language}'

    def __str__(self) -> str:
        if self.language is None:
            return self.value
        return f"{self.value}@{self.language}"


@dataclass(frozen=True)
class TypedLiteral:
    """Text with an explicit datatype IRI."""
    value: str
    datatype_iri: str

    def __post_init__(self) -> None:
        if self.value is None:
            raise InvalidArgumentError("Literal value must not be None")
        if not isinstance(self.value, str):
            raise InvalidArgumentError(
                f"Literal value must be a string, got: {type(self.value).__name__}"
            )
        if not isinstance(self.datatype_iri, str) or not self.datatype_iri:
            raise InvalidArgumentError("Typed literal requires a non-empty datatype IRI")
        require_xml_chars(self.value, "Literal value")
        require_xml_chars(self.datatype_iri, "Datatype IRI")

    def to_swrl_string(self) -> str:
        if self.datatype_iri.startswith(XSD):
            return f'"{self.value}"^^xsd:{self.datatype_iri[len(XSD):]}'
        return f'"{self.value}"^^<{self.datatype_iri}>'

    def __str__(self) -> str:
        return f"{self.value}^^{self.datatype_iri}"


RDFLiteral = Union[PlainLiteral, TypedLiteral]
