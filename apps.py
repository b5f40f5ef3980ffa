"""Django app configuration for Bizstock."""

from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class BizstockConfig(AppConfig):
    """Configuration for Bizstock app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "bizstock"
    verbose_name = _("Business Inventory")
