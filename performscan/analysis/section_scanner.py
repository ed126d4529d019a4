import logging
import re
from typing import Iterable, Optional
from performscan.core.models import CallGraph, Paragraph

logger = logging.getLogger(__name__)

# --- REGEX PATTERNS ---

# Paragraph label at the start of a (stripped) line, e.g. "100-START."
# Anything after the label is ignored.
RE_PARAGRAPH = re.compile(r"^(\d{3}-[\w-]+)", re.ASCII)

PERFORM_KEYWORD = "PERFORM"
# Target names are ASCII word characters; any whitespace may precede them.
RE_PERFORM = re.compile(r"PERFORM\s+([A-Za-z0-9_-]+)")

# Single-line only: "EXEC" on one line and "SQL" on the next is not matched.
RE_EXEC_SQL = re.compile(r"EXEC\s+SQL", re.IGNORECASE)

# --- SCANNER ---

class SectionScanner:
    """
    Line-at-a-time state machine that builds a CallGraph.

    The only state is the paragraph currently open. Each line goes through
    three ordered checks: a paragraph header opens a new paragraph and ends
    processing of that line; otherwise a PERFORM adds a call and an EXEC SQL
    marks the open paragraph. Lines seen before the first header are ignored.
    """

    def __init__(self):
        self.graph = CallGraph()
        self.current: Optional[Paragraph] = None

    def feed(self, line: str) -> None:
        # str.strip() keeps a byte order mark
        text = line.strip().strip("\ufeff").strip()

        header = RE_PARAGRAPH.match(text)
        if header:
            name = header.group(1)
            logger.debug(f"Paragraph header: {name}")
            self.current = Paragraph(name=name)
            self.graph.sections[name] = self.current
            return

        if self.current is None:
            return

        if text.startswith(PERFORM_KEYWORD):
            perform = RE_PERFORM.search(text)
            if perform:
                self.current.calls.append(perform.group(1))

        if RE_EXEC_SQL.search(text):
            self.current.uses_sql = True

    def feed_lines(self, lines: Iterable[str]) -> CallGraph:
        for line in lines:
            self.feed(line)
        return self.graph

def scan(source_text: str) -> CallGraph:
    """Scans COBOL source text into a CallGraph of paragraphs, PERFORMs and SQL usage."""
    graph = SectionScanner().feed_lines(source_text.split("\n"))
    logger.info(
        f"Scanned {len(graph.sections)} paragraphs "
        f"({sum(p.uses_sql for p in graph.sections.values())} using EXEC SQL)."
    )
    return graph
