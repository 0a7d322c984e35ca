from dataclasses import dataclass
from typing import Dict, List


@dataclass(frozen=True)
class TabifyResult:
    text: str
    changed_lines: List[int]
    candidate_lines: int

    @property
    def changed(self) -> bool:
        return bool(self.changed_lines)


@dataclass(frozen=True)
class JobResult:
    path: str
    status: str  # CHANGED|UNCHANGED|WOULD_CHANGE|SKIPPED|FAILED
    details: Dict[str, object]
