from item_analysis.session.state import (
    AnalysisViewState,
    FileUploaded,
    ResetRequested,
    ViewEvent,
    ViewStatus,
    initial_state,
    reduce,
)

__all__ = [
    "AnalysisViewState",
    "FileUploaded",
    "initial_state",
    "reduce",
    "ResetRequested",
    "ViewEvent",
    "ViewStatus",
]
