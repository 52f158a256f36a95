from __future__ import annotations

from dataclasses import dataclass, field

from scaffoldcheck.assertions.base import AssertionResult


@dataclass
class Tally:
    """Counters for one run. ``run == passed + failed`` after every record."""

    run: int = 0
    passed: int = 0
    failed: int = 0

    def record(self, result: AssertionResult) -> None:
        self.run += 1
        if result.passed:
            self.passed += 1
        else:
            self.failed += 1

    @property
    def all_passed(self) -> bool:
        return self.failed == 0

    @property
    def exit_code(self) -> int:
        return 0 if self.all_passed else 1


@dataclass
class SectionResult:
    """Assertions recorded by one check routine, in order."""

    name: str
    title: str
    assertions: list[AssertionResult] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def failures(self) -> int:
        return sum(1 for a in self.assertions if not a.passed)


@dataclass
class RunResult:
    tally: Tally
    sections: list[SectionResult]
    port: int
