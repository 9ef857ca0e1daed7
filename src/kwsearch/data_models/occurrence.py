from pydantic import BaseModel, ConfigDict, Field


class Occurrence(BaseModel):
    """How often one keyword appears in one document."""

    model_config = ConfigDict(frozen=True)

    doc_id: str
    frequency: int = Field(ge=1)

    def bumped(self) -> "Occurrence":
        """Return a copy with frequency + 1."""
        return self.model_copy(update={"frequency": self.frequency + 1})
