from pydantic import BaseModel, ConfigDict


class Doc(BaseModel):
    model_config = ConfigDict(frozen=True)

    doc_id: str  # manifest entry, usually the source file name
    text: str  # raw text, whitespace-delimited tokens
    title: str | None = None
