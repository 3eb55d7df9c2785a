from django.apps import AppConfig


class EventsConfig(AppConfig):
    name = "events"

    def ready(self) -> None:
        from events.stores.connection import ConnectionManager
        from events.stores.mongo_store import close_mongo, connect_mongo

        # One handle per process, shared by every request
        self.connections = ConnectionManager(connect_mongo, close=close_mongo)
