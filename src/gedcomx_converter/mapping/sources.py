from __future__ import annotations

from typing import Callable, List, Optional, Sequence

from gedcomx_converter.mapping.result import ConversionResult
from gedcomx_converter.model.conclusion import SourceDescription, SourceReference
from gedcomx_converter.records.raw import RawCitation, RawSource

# Maps a pointer citation to a description reference; may perform I/O.
CitationResolver = Callable[[RawCitation], Optional[str]]


def _citation_text(source: RawSource) -> str:
    pieces = [p for p in (source.author, source.title, source.publication) if p]
    return ", ".join(pieces) or source.text or source.id


class SourceMapper:
    """
    SOUR citations -> SourceReferences, SOUR records -> SourceDescriptions.

    Pointer citations reference ``#<id>``; inline citation text becomes a new
    SourceDescription registered in the result. Errors raised by a
    ``resolver`` (typically ``OSError``) propagate to the caller.
    """

    def __init__(self, resolver: Optional[CitationResolver] = None):
        self.resolver = resolver

    def to_source_description(self, source: RawSource, result: ConversionResult) -> SourceDescription:
        description = SourceDescription(
            id=source.id,
            citation=_citation_text(source),
            title=source.title,
        )
        result.add_source_description(description)
        return description

    def _inline_description(self, citation: RawCitation, result: ConversionResult) -> SourceDescription:
        description = SourceDescription(
            id=f"inline-{len(result.source_descriptions) + 1}",
            citation=citation.text or "",
        )
        result.add_source_description(description)
        return description

    def references_from(
        self,
        citations: Sequence[RawCitation],
        result: ConversionResult,
    ) -> List[SourceReference]:
        references: List[SourceReference] = []
        for citation in citations:
            if citation.pointer:
                target = self.resolver(citation) if self.resolver else None
                target = target or f"#{citation.pointer.strip('@')}"
            elif citation.text:
                target = f"#{self._inline_description(citation, result).id}"
            else:
                continue
            references.append(SourceReference(description=target, page=citation.page))
        return references
