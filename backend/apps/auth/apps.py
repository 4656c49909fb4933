from django.apps import AppConfig


class AuthConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.auth'
    # Unique label so it does not clash with django.contrib.auth
    label = 'ecofinds_auth'
