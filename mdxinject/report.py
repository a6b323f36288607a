"""
Per-document injection report (CLI `--report` output and `CodeInjector.run`).
"""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

InjectionState = Literal["unresolved", "injected"]


class InjectionRecord(BaseModel):
    component: Optional[str]
    reference: Optional[str] = None
    specifier: Optional[str] = None
    resolved_path: Optional[str] = None
    state: InjectionState


class InjectionReport(BaseModel):
    document: Optional[str] = None
    prop_name: str
    records: List[InjectionRecord] = Field(default_factory=list)

    @property
    def injected(self) -> int:
        return sum(1 for r in self.records if r.state == "injected")

    @property
    def unresolved(self) -> int:
        return sum(1 for r in self.records if r.state == "unresolved")


__all__ = ["InjectionState", "InjectionRecord", "InjectionReport"]
