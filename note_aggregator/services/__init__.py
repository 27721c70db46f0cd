from .aggregate_service import AggregationResult, aggregate_note, aggregate_to_clipboard

__all__ = [
    "AggregationResult",
    "aggregate_note",
    "aggregate_to_clipboard",
]
