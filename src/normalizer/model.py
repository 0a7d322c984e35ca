from dataclasses import dataclass


@dataclass(frozen=True)
class Run:
    start: int
    count: int  # spaces only, tabs never belong to a run

    @property
    def end(self) -> int:
        return self.start + self.count
