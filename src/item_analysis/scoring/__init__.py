from item_analysis.scoring.config import (
    InterpretationConfig,
    default_config,
)
from item_analysis.scoring.data_models import (
    AggregateStatistics,
    AnalysisResult,
    ItemStatistics,
)
from item_analysis.scoring.engine import (
    analyze,
    cronbach_alpha,
    descriptive_stats,
    item_difficulty,
    item_discrimination,
    item_variance,
    standard_error_of_measurement,
    total_scores,
)
from item_analysis.scoring.interpretation import (
    AnalysisReport,
    DifficultyBand,
    DiscriminationBand,
    ItemReport,
    ReliabilityBand,
    build_report,
    classify_alpha,
    classify_difficulty,
    classify_discrimination,
)

__all__ = [
    "AggregateStatistics",
    "analyze",
    "AnalysisReport",
    "AnalysisResult",
    "build_report",
    "classify_alpha",
    "classify_difficulty",
    "classify_discrimination",
    "cronbach_alpha",
    "default_config",
    "descriptive_stats",
    "DifficultyBand",
    "DiscriminationBand",
    "InterpretationConfig",
    "item_difficulty",
    "item_discrimination",
    "item_variance",
    "ItemReport",
    "ItemStatistics",
    "ReliabilityBand",
    "standard_error_of_measurement",
    "total_scores",
]
