"""Django app configuration for django-asset-dumper."""

from django.apps import AppConfig


class DjangoAssetDumperConfig(AppConfig):
    name = "django_asset_dumper"
    verbose_name = "Django Asset Dumper"
