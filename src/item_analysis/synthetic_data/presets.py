"""
Preset profiles for common exam scenarios, stored as YAML files.
"""

from pathlib import Path

from omegaconf import OmegaConf

from item_analysis.synthetic_data.config import GenerationConfig

PARAMS_DIR = Path(__file__).parent / "params"


def load_config(yaml_path: Path) -> GenerationConfig:
    """Load and validate a generation config from YAML.

    Raises:
        FileNotFoundError: If yaml_path doesn't exist
    """
    if not yaml_path.exists():
        raise FileNotFoundError(f"Config file not found: {yaml_path}")

    schema = OmegaConf.structured(GenerationConfig)
    user_config = OmegaConf.load(yaml_path)
    config = OmegaConf.merge(schema, user_config)

    result = OmegaConf.to_object(config)
    assert isinstance(result, GenerationConfig)
    return result


def get_available_presets() -> list[str]:
    return sorted(x.stem for x in PARAMS_DIR.glob("*.yaml"))


def get_preset(name: str) -> GenerationConfig:
    """Get a preset configuration by name."""
    config_path = PARAMS_DIR / f"{name}.yaml"
    if not config_path.exists():
        available_presets = get_available_presets()
        raise ValueError(
            f"Unknown preset: {name}. Available presets: {available_presets}"
        )
    return load_config(config_path)
