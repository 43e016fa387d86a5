"""
Container registry records.

Management-plane shapes (Microsoft.ContainerRegistry registries,
replications, webhooks) followed by the registry data-plane token and
listing shapes.
"""

from typing import Annotated, ClassVar, List, Optional

from pydantic import Field

from .common import ProvisioningState, Resource, SystemData
from .open_enum import LowercaseAliasOpenEnum, OpenEnum
from .paging import Continuable
from .records import ArmModel, Flatten


class SkuName(OpenEnum):
    """The SKU name of the container registry."""

    CLASSIC = "Classic"
    BASIC = "Basic"
    STANDARD = "Standard"
    PREMIUM = "Premium"


class SkuTier(OpenEnum):
    """The SKU tier based on the SKU name."""

    CLASSIC = "Classic"
    BASIC = "Basic"
    STANDARD = "Standard"
    PREMIUM = "Premium"


class Status(OpenEnum):
    """The value that indicates whether a policy is enabled or not."""

    ENABLED = "enabled"
    DISABLED = "disabled"


class TrustPolicyType(OpenEnum):
    """The type of trust policy."""

    NOTARY = "Notary"


class WebhookStatus(OpenEnum):
    """The status of the webhook at the time the operation was called."""

    ENABLED = "enabled"
    DISABLED = "disabled"


class WebhookAction(OpenEnum):
    PUSH = "push"
    DELETE = "delete"
    QUARANTINE = "quarantine"
    CHART_PUSH = "chart_push"
    CHART_DELETE = "chart_delete"


class Os(LowercaseAliasOpenEnum):
    """The operating system type required for the run."""

    WINDOWS = "Windows"
    LINUX = "Linux"


class Architecture(OpenEnum):
    """The OS architecture."""

    AMD64 = "amd64"
    X86 = "x86"
    N386 = "386"
    ARM = "arm"
    ARM64 = "arm64"


class Variant(OpenEnum):
    """Variant of the CPU."""

    V6 = "v6"
    V7 = "v7"
    V8 = "v8"


class Sku(ArmModel):
    """The SKU of a container registry."""

    name: SkuName = Field(
        ..., description="The SKU name of the container registry."
    )
    tier: Optional[SkuTier] = Field(None, description="The SKU tier based on the SKU name.")


class QuarantinePolicy(ArmModel):
    """The quarantine policy for a container registry."""

    status: Optional[Status] = None


class TrustPolicy(ArmModel):
    """The content trust policy for a container registry."""

    type_: Optional[TrustPolicyType] = Field(None, alias="type")
    status: Optional[Status] = None


class RetentionPolicy(ArmModel):
    """The retention policy for a container registry."""

    days: Optional[int] = Field(
        None,
        description="The number of days to retain an untagged manifest after which it gets purged.",
    )
    last_updated_time: Optional[str] = Field(None, alias="lastUpdatedTime")
    status: Optional[Status] = None


class Policies(ArmModel):
    """The policies for a container registry."""

    quarantine_policy: Optional[QuarantinePolicy] = Field(
        None, alias="quarantinePolicy"
    )
    trust_policy: Optional[TrustPolicy] = Field(None, alias="trustPolicy")
    retention_policy: Optional[RetentionPolicy] = Field(None, alias="retentionPolicy")


class RegistryProperties(ArmModel):
    """The properties of a container registry."""

    login_server: Optional[str] = Field(
        None,
        description="The URL that can be used to log into the container registry.",
        alias="loginServer",
    )
    creation_date: Optional[str] = Field(None, alias="creationDate")
    provisioning_state: Optional[ProvisioningState] = Field(
        None, alias="provisioningState"
    )
    admin_user_enabled: Optional[bool] = Field(None, alias="adminUserEnabled")
    policies: Optional[Policies] = None


class Registry(ArmModel):
    """An object that represents a container registry."""

    resource: Annotated[Resource, Flatten()] = Field(default_factory=Resource)
    sku: Sku
    properties: Optional[RegistryProperties] = None
    system_data: Optional[SystemData] = Field(None, alias="systemData")


class RegistryListResult(Continuable, ArmModel):
    """The result of a request to list container registries."""

    value: Optional[List[Registry]] = None
    next_link: Optional[str] = Field(
        None,
        description="The URI that can be used to request the next list of container registries.",
        alias="nextLink",
    )


class RegistryNameCheckRequest(ArmModel):
    """A request to check whether a container registry name is available."""

    name: str = Field(..., description="The name of the container registry.")
    type_: str = Field(
        "Microsoft.ContainerRegistry/registries",
        description="The resource type of the container registry.",
        alias="type",
    )


class RegistryNameStatus(ArmModel):
    name_available: Optional[bool] = Field(None, alias="nameAvailable")
    reason: Optional[str] = None
    message: Optional[str] = None


class ReplicationProperties(ArmModel):
    provisioning_state: Optional[ProvisioningState] = Field(
        None, alias="provisioningState"
    )
    region_endpoint_enabled: Optional[bool] = Field(None, alias="regionEndpointEnabled")


class Replication(ArmModel):
    """An object that represents a replication for a container registry."""

    resource: Annotated[Resource, Flatten()] = Field(default_factory=Resource)
    properties: Optional[ReplicationProperties] = None


class ReplicationListResult(Continuable, ArmModel):
    value: Optional[List[Replication]] = None
    next_link: Optional[str] = Field(None, alias="nextLink")


class WebhookProperties(ArmModel):
    status: Optional[WebhookStatus] = None
    scope: Optional[str] = Field(
        None,
        description="The scope of repositories where the event can be triggered.",
    )
    actions: List[WebhookAction] = Field(
        ..., description="The list of actions that trigger the webhook to post notifications."
    )
    provisioning_state: Optional[ProvisioningState] = Field(
        None, alias="provisioningState"
    )


class Webhook(ArmModel):
    """An object that represents a webhook for a container registry."""

    resource: Annotated[Resource, Flatten()] = Field(default_factory=Resource)
    properties: Optional[WebhookProperties] = None


class WebhookListResult(Continuable, ArmModel):
    value: Optional[List[Webhook]] = None
    next_link: Optional[str] = Field(None, alias="nextLink")


class PlatformProperties(ArmModel):
    """The platform properties against which the run has to happen."""

    os: Os = Field(..., description="The operating system type required for the run.")
    architecture: Optional[Architecture] = None
    variant: Optional[Variant] = None


# Data plane


class TokenGrantType(OpenEnum):
    """Grant type used when exchanging credentials for a registry token."""

    REFRESH_TOKEN = "refresh_token"
    PASSWORD = "password"
    ACCESS_TOKEN = "access_token"
    ACCESS_TOKEN_REFRESH_TOKEN = "access_token_refresh_token"


class AccessToken(ArmModel):
    access_token: Optional[str] = Field(
        None, description="The access token for performing authenticated requests"
    )


class RefreshToken(ArmModel):
    refresh_token: Optional[str] = Field(
        None,
        description="The refresh token to be used for generating access tokens",
    )


class Repositories(Continuable, ArmModel):
    """List of repositories."""

    continuation_field: ClassVar[Optional[str]] = "link"
    items_field: ClassVar[str] = "names"

    names: Optional[List[str]] = Field(None, alias="repositories")
    link: Optional[str] = None


class ChangeableAttributes(ArmModel):
    delete_enabled: Optional[bool] = Field(None, alias="deleteEnabled")
    write_enabled: Optional[bool] = Field(None, alias="writeEnabled")
    list_enabled: Optional[bool] = Field(None, alias="listEnabled")
    read_enabled: Optional[bool] = Field(None, alias="readEnabled")


class TagAttributesBase(ArmModel):
    """Tag attribute details."""

    name: Optional[str] = None
    digest: Optional[str] = None
    created_time: Optional[str] = Field(None, alias="createdTime")
    last_update_time: Optional[str] = Field(None, alias="lastUpdateTime")
    signed: Optional[bool] = None
    changeable_attributes: Optional[ChangeableAttributes] = Field(
        None, alias="changeableAttributes"
    )


class TagList(Continuable, ArmModel):
    """List of tag details."""

    continuation_field: ClassVar[Optional[str]] = None
    items_field: ClassVar[str] = "tags"

    registry: Optional[str] = None
    image_name: Optional[str] = Field(None, alias="imageName")
    tags: Optional[List[TagAttributesBase]] = None


class ManifestAttributesBase(ArmModel):
    """Manifest details."""

    digest: Optional[str] = None
    image_size: Optional[int] = Field(None, alias="imageSize")
    created_time: Optional[str] = Field(None, alias="createdTime")
    last_update_time: Optional[str] = Field(None, alias="lastUpdateTime")
    architecture: Optional[Architecture] = None
    os: Optional[Os] = None
    media_type: Optional[str] = Field(None, alias="mediaType")
    tags: Optional[List[str]] = None
    changeable_attributes: Optional[ChangeableAttributes] = Field(
        None, alias="changeableAttributes"
    )
