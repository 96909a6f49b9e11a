"""Public package interface for goodstuff."""

from .casing import (
    split_words,
    to_camel_case,
    to_constant_case,
    to_kebab_case,
    to_pascal_case,
    to_snake_case,
    to_title_case,
)
from .config import SamplingConfig
from .errors import (
    EmptyCollectionError,
    GoodStuffError,
    InvalidWeightError,
    LengthMismatchError,
    SamplingError,
)
from .iteration import down_to, each, each_with_index, in_parallel_with, max_by, min_by, times, up_to
from .random_source import SeededRandomSource, random_source_from_config
from .sampling import (
    WeightedSampler,
    select_pairs,
    select_uniform,
    select_uniform_index,
    select_weighted,
    select_weighted_index,
)
from .vectors import Vector2, Vector3
from .weight_tables import WeightTable, WeightedEntry, load_weight_table

__all__ = [
    "EmptyCollectionError",
    "GoodStuffError",
    "InvalidWeightError",
    "LengthMismatchError",
    "SamplingConfig",
    "SamplingError",
    "SeededRandomSource",
    "Vector2",
    "Vector3",
    "WeightTable",
    "WeightedEntry",
    "WeightedSampler",
    "down_to",
    "each",
    "each_with_index",
    "in_parallel_with",
    "load_weight_table",
    "max_by",
    "min_by",
    "random_source_from_config",
    "select_pairs",
    "select_uniform",
    "select_uniform_index",
    "select_weighted",
    "select_weighted_index",
    "split_words",
    "times",
    "to_camel_case",
    "to_constant_case",
    "to_kebab_case",
    "to_pascal_case",
    "to_snake_case",
    "to_title_case",
    "up_to",
]
