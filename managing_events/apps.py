from django.apps import AppConfig


class ManagingEventsConfig(AppConfig):
    name = "managing_events"
    verbose_name = "Managing Events"
