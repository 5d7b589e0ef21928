from pydantic import BaseModel, ConfigDict, Field

from src.config.constants import DEFAULT_ICON_NAME, SECURE_ENDPOINT_NAME
from src.models.types import IconVariant


class UrlCommandOptions(BaseModel):
    """
    Per-command settings for URL commands, with documented defaults.

    Icons come from the Fluent UI System Icons catalog
    (https://fluenticons.co/). Names are formatted automatically, so they can
    be copied from the site as-is ("Document Table" -> "DocumentTable").
    Icons known to render: "Document Table", "Document Toolbox",
    "Document Add", "Document Text", "Settings", "Home", "Apps".
    """

    model_config = ConfigDict(frozen=True)

    icon_name: str = Field(
        DEFAULT_ICON_NAME, description="Catalog icon name, formatted at registration"
    )
    icon_variant: IconVariant = Field(
        IconVariant.FILLED, description="Regular (outlined) or Filled icon"
    )
    append_to_service_url: bool = Field(
        True,
        description="Append the URL to the resource's endpoint URL instead of using it as-is",
    )
    endpoint_name: str = Field(
        SECURE_ENDPOINT_NAME, description="Endpoint resolved when appending"
    )
