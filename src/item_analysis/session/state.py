"""
View state of the analysis page as an immutable value.

Every user action is an event; `reduce` maps (state, event) to the next
state without mutating anything.
"""

import logging
from dataclasses import dataclass
from enum import StrEnum

from item_analysis.core.data import ParseError, parse_response_csv
from item_analysis.scoring.config import InterpretationConfig
from item_analysis.scoring.engine import analyze
from item_analysis.scoring.interpretation import AnalysisReport, build_report

logger = logging.getLogger(__name__)


class ViewStatus(StrEnum):
    IDLE = "idle"
    READY = "ready"
    ERROR = "error"


@dataclass(frozen=True)
class AnalysisViewState:
    status: ViewStatus = ViewStatus.IDLE
    file_name: str | None = None
    report: AnalysisReport | None = None
    error: str | None = None


@dataclass(frozen=True)
class FileUploaded:
    file_name: str
    text: str


@dataclass(frozen=True)
class ResetRequested:
    pass


ViewEvent = FileUploaded | ResetRequested


def initial_state() -> AnalysisViewState:
    return AnalysisViewState()


def reduce(
    state: AnalysisViewState,
    event: ViewEvent,
    config: InterpretationConfig | None = None,
) -> AnalysisViewState:
    """
    Compute the view state that follows `event`.

    A new upload always replaces the previous report or error. Parse
    failures produce an ERROR state carrying the message; the user can
    upload again from there.
    """
    if isinstance(event, ResetRequested):
        return initial_state()

    if isinstance(event, FileUploaded):
        try:
            matrix = parse_response_csv(event.text)
        except ParseError as e:
            logger.info(f"Could not analyse {event.file_name}: {e}")
            return AnalysisViewState(
                status=ViewStatus.ERROR,
                file_name=event.file_name,
                error=str(e),
            )
        report = build_report(analyze(matrix), config)
        return AnalysisViewState(
            status=ViewStatus.READY,
            file_name=event.file_name,
            report=report,
        )

    raise TypeError(f"Unknown event: {event!r}")
