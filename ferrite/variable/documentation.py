"""Free-form documentation attached to variable specifications."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any


@dataclass(frozen=True)
class Documentation:
    """Documentation about a variable.

    The summary is plain text; paragraphs may use simple inline Markdown.
    """

    summary: str = ""
    paragraphs: tuple[str, ...] = ()
    is_important: bool = False


@dataclass(frozen=True)
class DocumentationBuilder:
    """A fluent builder that appends a Documentation to ``docs`` when done."""

    docs: list[Documentation]
    doc: Documentation = field(default_factory=Documentation)

    def summary(self, summary: str) -> DocumentationBuilder:
        """Return a builder with the summary set."""
        return replace(self, doc=replace(self.doc, summary=summary))

    def paragraph(self, *args: str) -> ParagraphFormatter:
        """Start a paragraph; the parts are joined with spaces into a %-format template."""
        return ParagraphFormatter(self, " ".join(args))

    def important(self) -> DocumentationBuilder:
        """Return a builder that marks the documentation as important."""
        return replace(self, doc=replace(self.doc, is_important=True))

    def done(self) -> None:
        """Add the built documentation to the target list."""
        self.docs.append(self.doc)


@dataclass(frozen=True)
class ParagraphFormatter:
    """Applies values to a paragraph template."""

    builder: DocumentationBuilder
    template: str

    def format(self, *args: Any) -> DocumentationBuilder:
        """Return a builder with the formatted paragraph added."""
        text = self.template % args
        doc = self.builder.doc
        return replace(self.builder, doc=replace(doc, paragraphs=(*doc.paragraphs, text)))