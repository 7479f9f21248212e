"""
Shared application configuration.
"""
from django.apps import AppConfig


class SharedConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'shared'
    verbose_name = 'Shared'

    def ready(self):
        from shared.infrastructure.di.container import init_container
        init_container()
