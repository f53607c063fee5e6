from pydantic import BaseModel, ConfigDict, field_validator


class ProfileSignals(BaseModel):
    """Signals recovered from a profile page, or synthesized from its URL."""

    model_config = ConfigDict(frozen=True)

    name: str
    title: str | None = None
    company: str | None = None
    location: str | None = None
    experience: tuple[str, ...] = ()
    skills: tuple[str, ...] = ()

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name must not be empty")
        return v

    @property
    def has_signals(self) -> bool:
        return bool(self.title or self.company or self.location or self.experience or self.skills)
