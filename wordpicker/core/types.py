"""Type definitions for wordpicker."""

from typing import Union

from pydantic import BaseModel, ConfigDict


class WordMetadata(BaseModel):
    """A selected word with its derived metadata."""

    model_config = ConfigDict(frozen=True)

    word: str
    length: int
    entropy: float


# Shape of a selection: plain words, metadata records, or one joined string
SelectionResult = Union[list[str], list[WordMetadata], str]
