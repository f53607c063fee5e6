"""
Convert numerical TOV parameters (0-1) into qualitative labels for the AI prompt.
Each dimension falls into one of three buckets; a value equal to a threshold
belongs to the lower bucket.
"""
from app.models.tov_config import ToneProfile

DEFAULT_FORMALITY = 0.7
DEFAULT_WARMTH = 0.6
DEFAULT_DIRECTNESS = 0.7

# (threshold, label) checked top-down with value > threshold, then the fallback label
FORMALITY_BANDS = [
    (0.8, "very formal"),
    (0.6, "professional"),
]
FORMALITY_FLOOR = "casual"

WARMTH_BANDS = [
    (0.7, "warm and friendly"),
    (0.4, "professional"),
]
WARMTH_FLOOR = "direct and business-focused"

DIRECTNESS_BANDS = [
    (0.7, "very direct"),
    (0.4, "moderately direct"),
]
DIRECTNESS_FLOOR = "subtle and indirect"


def clamp_0_1(v: float) -> float:
    return max(0.0, min(1.0, float(v)))


def _band(value: float, bands: list[tuple[float, str]], floor: str) -> str:
    for threshold, label in bands:
        if value > threshold:
            return label
    return floor


def normalize_tov(
    formality: float | None = None,
    warmth: float | None = None,
    directness: float | None = None,
) -> ToneProfile:
    """Apply defaults to missing dimensions, clamp to [0, 1] and pick a label for each."""
    f = clamp_0_1(DEFAULT_FORMALITY if formality is None else formality)
    w = clamp_0_1(DEFAULT_WARMTH if warmth is None else warmth)
    d = clamp_0_1(DEFAULT_DIRECTNESS if directness is None else directness)
    return ToneProfile(
        formality=f,
        warmth=w,
        directness=d,
        formality_label=_band(f, FORMALITY_BANDS, FORMALITY_FLOOR),
        warmth_label=_band(w, WARMTH_BANDS, WARMTH_FLOOR),
        directness_label=_band(d, DIRECTNESS_BANDS, DIRECTNESS_FLOOR),
    )
