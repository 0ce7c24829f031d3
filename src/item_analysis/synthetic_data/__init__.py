from item_analysis.synthetic_data.config import GenerationConfig, NormalParams
from item_analysis.synthetic_data.generators import (
    GeneratedData,
    generate_rasch_responses,
)
from item_analysis.synthetic_data.presets import get_preset, load_config

__all__ = [
    "GeneratedData",
    "generate_rasch_responses",
    "GenerationConfig",
    "get_preset",
    "load_config",
    "NormalParams",
]
