from .tov import normalize_tov
from .templates import SEQUENCE_GENERATION_PROMPT, build_sequence_prompt, format_profile

__all__ = ["normalize_tov", "SEQUENCE_GENERATION_PROMPT", "build_sequence_prompt", "format_profile"]
