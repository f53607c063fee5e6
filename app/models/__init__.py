from .prospect import ProfileSignals
from .tov_config import ToneProfile

__all__ = ["ProfileSignals", "ToneProfile"]
