from events.handlers.views import (
    BookingCreateView,
    EventDetailView,
    EventListView,
    SimilarEventListView,
)

__all__ = [
    "EventListView",
    "EventDetailView",
    "SimilarEventListView",
    "BookingCreateView",
]
