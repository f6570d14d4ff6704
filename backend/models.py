from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass(frozen=True)
class Breadcrumb:
    href: str
    label: str

    def to_dict(self):
        return {"href": self.href, "label": self.label}


@dataclass
class ConversionResult:
    # keyed by base as a string: "2", "8", "10", "16"
    results: Dict[str, str]
    error: Optional[str] = None
    code: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self):
        return {"results": dict(self.results), "error": self.error, "code": self.code}


@dataclass(frozen=True)
class LinearEquation:
    """a*x + b = c"""
    a: float
    b: float
    c: float


@dataclass
class Solution:
    x: float
    text: str
    steps: List[str] = field(default_factory=list)

    def to_dict(self):
        return {"x": self.x, "result": self.text, "steps": list(self.steps)}
