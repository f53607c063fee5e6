from pydantic import BaseModel, ConfigDict


class ToneProfile(BaseModel):
    """Clamped tone-of-voice values with the wording chosen for each dimension."""

    model_config = ConfigDict(frozen=True)

    formality: float
    warmth: float
    directness: float
    formality_label: str
    warmth_label: str
    directness_label: str

    @property
    def labels(self) -> tuple[str, str, str]:
        return (self.formality_label, self.warmth_label, self.directness_label)

    def describe(self) -> str:
        return ", ".join(self.labels)
