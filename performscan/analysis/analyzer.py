import logging
from typing import Optional

from performscan.core.models import AnalysisResult
from performscan.analysis.section_scanner import scan
from performscan.analysis.call_tree import build_call_tree, contains_sql
from performscan.pipeline.source_loader import read_source

logger = logging.getLogger(__name__)

def analyze_source(source_text: str, start: str, source: Optional[str] = None) -> AnalysisResult:
    """Scans the source, builds the call tree from `start` and checks it for EXEC SQL."""
    graph = scan(source_text)
    if start not in graph.sections:
        logger.warning(f"Start paragraph '{start}' is not defined in the source.")

    tree = build_call_tree(graph, start)
    uses_sql = contains_sql(tree)
    logger.info(f"Call tree from '{start}': EXEC SQL {'found' if uses_sql else 'not found'}.")

    return AnalysisResult(
        start=start,
        source=source,
        sections=len(graph.sections),
        uses_sql=uses_sql,
        tree=tree,
    )

def analyze_file(file_path, start: str) -> AnalysisResult:
    """Reads a COBOL file and analyzes it. Raises SourceReadError if it cannot be read."""
    content = read_source(file_path)
    return analyze_source(content, start, source=str(file_path))
