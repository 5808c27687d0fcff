"""Structured source document rendered with fixed two-space indentation.

Emitters describe nesting by opening blocks, never by counting spaces:

    doc = SourceDocument()
    with doc.block("export class Point {", "}") as body:
        body.line("x: number;")
    doc.render()
"""
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Union

INDENT = "  "


@dataclass
class Line:
    text: str


@dataclass
class Block:
    """A header line, children indented one level deeper, and a footer line."""
    header: Optional[str]
    footer: Optional[str]
    children: List[Union[Line, "Block"]] = field(default_factory=list)
    indented: bool = True

    def line(self, text: str) -> "Block":
        self.children.append(Line(text))
        return self

    def lines(self, *texts: str) -> "Block":
        for text in texts:
            self.line(text)
        return self

    @contextmanager
    def block(self, header: Optional[str], footer: Optional[str] = None) -> Iterator["Block"]:
        child = Block(header, footer)
        self.children.append(child)
        yield child

    def render_lines(self, depth: int) -> List[str]:
        output: List[str] = []
        inner = depth + 1 if self.indented else depth
        if self.header is not None:
            output.append(f"{INDENT * depth}{self.header}")
        for child in self.children:
            if isinstance(child, Line):
                output.append(f"{INDENT * inner}{child.text}" if child.text else "")
            else:
                output.extend(child.render_lines(inner))
        if self.footer is not None:
            output.append(f"{INDENT * depth}{self.footer}")
        return output


class SourceDocument(Block):
    """Top-level block with no header or footer."""

    def __init__(self):
        super().__init__(header=None, footer=None, indented=False)

    def render(self) -> str:
        return "\n".join(self.render_lines(0))
