from datetime import datetime

from brainapi.domain.shared.model.value import ValueObject


class DataStatus(ValueObject):
    """Lifecycle flags describing how fresh the cached dataset is."""

    fetched: bool = False
    ready: bool = False
    in_use: bool = False
    last_updated: datetime
