from datetime import datetime
from typing import Literal

from pydantic import ConfigDict

from brainapi.domain.shared.model.value import ValueObject

RecordField = Literal["country", "category", "currency", "name", "type"]

RECORD_FIELDS: tuple[RecordField, ...] = ("country", "category", "currency", "name", "type")


class Record(ValueObject):
    """The five-field projection of one upstream hit."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    country: str | None = None
    category: str | None = None
    currency: str | None = None
    name: str | None = None
    type: str | None = None


class Dataset(ValueObject):
    """An ingested batch of records. Replaced wholesale, never edited."""

    records: tuple[Record, ...]
    loaded_at: datetime

    def __len__(self) -> int:
        return len(self.records)
