from django.urls import path

from events.handlers import BookingCreateView, EventDetailView, EventListView, SimilarEventListView

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("event", EventDetailView.as_view(), name="event-lookup"),
    path("events/<str:slug>", EventDetailView.as_view(), name="event-detail"),
    path(
        "events/<str:slug>/similar",
        SimilarEventListView.as_view(),
        name="similar-event-list",
    ),
    path(
        "events/<str:slug>/bookings",
        BookingCreateView.as_view(),
        name="booking-create",
    ),
]
