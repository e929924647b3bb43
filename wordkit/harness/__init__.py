from .core import run_case, run_batch
from .slots import slot_problem, fill_slots

__all__ = ["run_case", "run_batch", "slot_problem", "fill_slots"]
