from __future__ import annotations

import sys
from typing import TextIO

import structlog

from .config import Settings, settings as default_settings
from .errors import ForbiddenDomainsError
from .index import build_index
from .logging_config import setup_logging
from .models import CheckResult, RunStats, Verdict
from .output import get_handler
from .reader import read_count, read_domains

log = structlog.get_logger()


def run(stdin: TextIO, stdout: TextIO, settings: Settings | None = None) -> int:
    settings = settings or default_settings
    setup_logging(settings.log_level)
    log.info("starting_forbidden_domains", output_format=settings.output_format)

    stats = RunStats()
    handler = get_handler(settings.output_format, stdout)

    try:
        # 1. Forbidden set
        forbidden = read_domains(stdin, read_count(stdin))
        stats.forbidden_read = len(forbidden)

        # 2. Build the index once
        index = build_index(forbidden, strict=settings.strict_labels)

        # 3. Candidates, answered in input order
        candidates = read_domains(stdin, read_count(stdin))
        for raw in candidates:
            verdict = index.check(raw)
            handler.emit_result(CheckResult(domain=raw, verdict=verdict))
            stats.candidates_checked += 1
            if verdict is Verdict.BAD:
                stats.bad_count += 1
            else:
                stats.good_count += 1
    except ForbiddenDomainsError as exc:
        log.error("run_failed", error=str(exc), **stats.model_dump())
        return 1

    handler.emit_summary(stats)
    return 0


def main() -> None:
    sys.exit(run(sys.stdin, sys.stdout))


if __name__ == "__main__":
    main()
