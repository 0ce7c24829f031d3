from dataclasses import dataclass, field
from typing import Optional


@dataclass
class NormalParams:
    """Parameters of a normal distribution."""

    mean: float = 0.0
    std: float = 1.0

    def __post_init__(self) -> None:
        if self.std <= 0:
            raise ValueError(f"std must be positive, got {self.std}")


def _default_ability() -> NormalParams:
    return NormalParams(mean=0.0, std=1.0)


def _default_item_location() -> NormalParams:
    return NormalParams(mean=0.0, std=1.0)


@dataclass
class GenerationConfig:
    """Complete configuration for generating a synthetic response file.

    Responses follow a Rasch model: a student with ability theta answers
    an item with location b correctly with probability
    1 / (1 + exp(-(theta - b))).

    Attributes:
        n_students: Number of simulated students.
        n_items: Number of dichotomous items.
        ability: Distribution of student abilities.
        item_location: Distribution of item locations (higher = harder).
        random_seed: Seed for reproducibility. None uses entropy.
    """

    n_students: int
    n_items: int

    ability: NormalParams = field(default_factory=_default_ability)
    item_location: NormalParams = field(
        default_factory=_default_item_location
    )

    # OmegaConf structured configs need typing.Optional here
    random_seed: Optional[int] = None  # noqa: UP007

    def __post_init__(self) -> None:
        if self.n_students <= 0:
            raise ValueError("Must have at least 1 student")
        if self.n_items <= 0:
            raise ValueError("Must have at least 1 item")
