"""Read-only views over a Dataset snapshot.

Every function is pure and recomputes from the records it is given; nothing is
cached between calls. Callers pass a snapshot obtained from DatasetStore and
must not hold any lock while these run.

Null handling: rows whose grouping field is None are left out of every bucket,
so group counts sum to the number of rows with a non-null value.
"""

from collections import Counter

from brainapi.domain.dataset.model.aggregate import GroupCount
from brainapi.domain.dataset.model.record import RECORD_FIELDS, Dataset, RecordField


def raw_rows(dataset: Dataset) -> list[dict[str, str | None]]:
    """Every record as a plain mapping, in ingestion order, nulls included."""
    return [{field: getattr(record, field) for field in RECORD_FIELDS} for record in dataset.records]


def group_by_field(
    dataset: Dataset, field: RecordField, category: str | None = None
) -> list[GroupCount]:
    """Count rows per distinct value of ``field``, labels in first-seen order.

    When ``category`` is given, only rows whose category equals it exactly are
    counted.
    """
    records = dataset.records
    if category is not None:
        records = tuple(record for record in records if record.category == category)
    # Counter preserves insertion order, which gives first-seen labels
    counts = Counter(
        value for record in records if (value := getattr(record, field)) is not None
    )
    return [GroupCount(label=label, count=count) for label, count in counts.items()]


def group_by_category(dataset: Dataset) -> list[GroupCount]:
    return group_by_field(dataset, "category")


def unique_names_where_category(dataset: Dataset, category: str) -> list[str]:
    """Distinct non-null names of rows whose category equals ``category`` exactly.

    Order is that of each name's first occurrence.
    """
    names = (
        record.name
        for record in dataset.records
        if record.category == category and record.name is not None
    )
    return list(dict.fromkeys(names))
