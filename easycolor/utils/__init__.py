from .num_utils import is_close_to_int, round_half_away, nan_to_zero
from .default import value_or_default
from .dimension import get_dimension

__all__ = ["is_close_to_int", "round_half_away", "nan_to_zero", "value_or_default", "get_dimension"]
