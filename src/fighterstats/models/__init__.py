"""Fighter record models."""

from .fighter import CleanRecord, RawRecord, Stance, WeightClass

__all__ = ["CleanRecord", "RawRecord", "Stance", "WeightClass"]
