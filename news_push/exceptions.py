class FeedFetchError(Exception):
    """Raised when an RSS/Atom feed cannot be fetched or parsed."""


class AggregationError(Exception):
    """Raised when no configured feed could be fetched in an aggregation pass."""


class NotificationError(Exception):
    """Raised when the push provider rejects a notification."""
