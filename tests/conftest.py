from typing import Iterable, List

from decisions import Prompt
from reports import DayBriefing


class ScriptedRandom:
    """RandomSource that replays fixed draws and fails loudly when it runs out."""

    def __init__(self, values: Iterable[float]):
        self.values = list(values)
        self.used = 0

    def random(self) -> float:
        if self.used >= len(self.values):
            raise AssertionError(f"random draw #{self.used + 1} was not scripted")
        v = self.values[self.used]
        self.used += 1
        return v

    @property
    def exhausted(self) -> bool:
        return self.used == len(self.values)


class ScriptedBoundary:
    """Answers prompts from a queue and keeps every prompt and report it saw."""

    def __init__(self, answers: Iterable = ()):
        self.answers = list(answers)
        self.prompts: List[Prompt] = []
        self.reports: List = []

    def request_decision(self, prompt: Prompt):
        self.prompts.append(prompt)
        if not self.answers:
            raise AssertionError(f"unexpected prompt {prompt}")
        return self.answers.pop(0)

    def emit_report(self, report) -> None:
        self.reports.append(report)

    def of_type(self, cls) -> List:
        return [r for r in self.reports if isinstance(r, cls)]

    @property
    def briefings(self) -> List[DayBriefing]:
        return self.of_type(DayBriefing)
