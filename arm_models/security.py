"""
Security scheme declarations from Swagger ``securityDefinitions``.

Only the declarations are modelled. Acquiring tokens is the job of the
credential implementation in the surrounding SDK runtime.
"""

from typing import Dict, List, Optional

from pydantic import Field

from .open_enum import OpenEnum
from .records import ArmModel

AZURE_PUBLIC_CLOUD = "https://management.azure.com"


class SecuritySchemeType(OpenEnum):
    """The type of the security scheme."""

    BASIC = "basic"
    API_KEY = "apiKey"
    OAUTH2 = "oauth2"


class ApiKeyLocation(OpenEnum):
    """Where an API key is sent."""

    QUERY = "query"
    HEADER = "header"


class OAuth2Flow(OpenEnum):
    """The flow used by an OAuth2 security scheme."""

    IMPLICIT = "implicit"
    PASSWORD = "password"
    APPLICATION = "application"
    ACCESS_CODE = "accessCode"


class SecurityScheme(ArmModel):
    """A security scheme that can be used by the operations."""

    type_: SecuritySchemeType = Field(..., alias="type")
    description: Optional[str] = None
    name: Optional[str] = Field(
        None, description="The name of the header or query parameter to be used."
    )
    in_: Optional[ApiKeyLocation] = Field(None, alias="in")
    flow: Optional[OAuth2Flow] = None
    authorization_url: Optional[str] = Field(None, alias="authorizationUrl")
    token_url: Optional[str] = Field(None, alias="tokenUrl")
    scopes: Optional[Dict[str, str]] = None

    def scope_names(self) -> List[str]:
        return list(self.scopes or {})


AZURE_AUTH = SecurityScheme(
    type=SecuritySchemeType.OAUTH2,
    description="Azure Active Directory OAuth2 Flow",
    flow=OAuth2Flow.IMPLICIT,
    authorization_url="https://login.microsoftonline.com/common/oauth2/authorize",
    scopes={"user_impersonation": "impersonate your user account"},
)


def default_scopes(endpoint: str = AZURE_PUBLIC_CLOUD) -> List[str]:
    """Token scopes a generated client requests when none are configured."""
    return [f"{endpoint}/"]
