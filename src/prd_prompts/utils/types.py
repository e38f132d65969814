"""Type definitions for the prompt template tool."""
from typing import List, TypedDict


class TemplateInfo(TypedDict):
    """Metadata describing one available template."""
    name: str
    title: str
    description: str
    path: str
    placeholders: List[str]
