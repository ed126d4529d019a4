from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Optional

class Paragraph(BaseModel):
    name: str
    calls: List[str] = Field(default_factory=list)
    uses_sql: bool = False

class CallGraph(BaseModel):
    """Paragraphs of one source file, keyed by name in first-occurrence order."""
    sections: Dict[str, Paragraph] = Field(default_factory=dict)

    def calls_of(self, name: str) -> List[str]:
        """PERFORM targets recorded for `name`; empty for undefined paragraphs."""
        paragraph = self.sections.get(name)
        return paragraph.calls if paragraph is not None else []

    def uses_sql(self, name: str) -> bool:
        """Whether `name` contains EXEC SQL; False for undefined paragraphs."""
        paragraph = self.sections.get(name)
        return paragraph.uses_sql if paragraph is not None else False

    @property
    def perform_calls(self) -> Dict[str, List[str]]:
        return {name: list(p.calls) for name, p in self.sections.items()}

    @property
    def sql_usage(self) -> Dict[str, bool]:
        return {name: p.uses_sql for name, p in self.sections.items()}

class CallTree(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    uses_sql: bool = False
    children: List["CallTree"] = Field(default_factory=list)

CallTree.model_rebuild()

class AnalysisResult(BaseModel):
    start: str
    source: Optional[str] = None
    sections: int = 0
    uses_sql: bool
    tree: CallTree
