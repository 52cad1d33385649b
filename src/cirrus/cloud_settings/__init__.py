"""Cloud-hosted project settings."""

from cirrus.cloud_settings.http_client import HttpxAuthorizedClient
from cirrus.cloud_settings.service import (
    CloudSettingsService,
    get_cloud_settings_service,
    reset_cloud_settings_service,
)
from cirrus.cloud_settings.types import (
    AuthorizedClient,
    HttpResponse,
    OAuthClientProvider,
    ProjectSettings,
    RequestError,
    ResponseInfo,
)

__all__ = [
    "AuthorizedClient",
    "CloudSettingsService",
    "HttpResponse",
    "HttpxAuthorizedClient",
    "OAuthClientProvider",
    "ProjectSettings",
    "RequestError",
    "ResponseInfo",
    "get_cloud_settings_service",
    "reset_cloud_settings_service",
]
