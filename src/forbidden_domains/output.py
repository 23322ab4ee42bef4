from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TextIO

import structlog

from .models import CheckResult, RunStats

log = structlog.get_logger()


class OutputHandler(ABC):
    def __init__(self, stream: TextIO) -> None:
        self.stream = stream

    @abstractmethod
    def emit_result(self, result: CheckResult) -> None: ...

    def emit_summary(self, stats: RunStats) -> None:
        log.info("run_complete", **stats.model_dump())


class StdoutHandler(OutputHandler):
    """One verdict token per line, nothing else."""

    def emit_result(self, result: CheckResult) -> None:
        print(result.verdict.value, file=self.stream)


class JsonLinesHandler(OutputHandler):
    def emit_result(self, result: CheckResult) -> None:
        print(result.model_dump_json(), file=self.stream)


def get_handler(output_format: str, stream: TextIO) -> OutputHandler:
    if output_format == "jsonl":
        return JsonLinesHandler(stream)
    return StdoutHandler(stream)
