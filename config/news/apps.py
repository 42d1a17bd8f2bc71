import time

from django.apps import AppConfig


class NewsConfig(AppConfig):
    name = 'news'
    verbose_name = "News"

    def ready(self):
        from .catalog import build_default_catalog

        # Built once per process; views only ever read it.
        self.catalog = build_default_catalog()
        self.started_at = time.monotonic()

    @property
    def uptime(self) -> float:
        """Seconds since the app was loaded."""
        return time.monotonic() - self.started_at
