"""Data models for the selection pipeline stages."""

from pydantic import BaseModel, Field


class PipelineStats(BaseModel):
    """Counts collected while running one selection."""

    input_words: int = 0
    after_filters: int = 0
    after_dedup: int = 0
    weighted_pool: int = 0
    selected: int = 0
    rejections: dict[str, int] = Field(default_factory=dict)
    phonetic_duplicates: int = 0
    unsupported_options: list[str] = Field(default_factory=list)
    inert_options: list[str] = Field(default_factory=list)
    seeded: bool = False
    elapsed_time: float = 0.0
