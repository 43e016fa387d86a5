"""Shapes shared by every ARM resource provider."""

from typing import Any, Dict, List, Optional

from pydantic import Field

from .open_enum import OpenEnum
from .records import ArmModel


class ProvisioningState(OpenEnum):
    """The current provisioning state."""

    SUCCEEDED = "Succeeded"
    UPDATING = "Updating"
    DELETING = "Deleting"
    FAILED = "Failed"
    CREATING = "Creating"
    CANCELED = "Canceled"


class CreatedByType(OpenEnum):
    """The type of identity that created or last modified the resource."""

    USER = "User"
    APPLICATION = "Application"
    MANAGED_IDENTITY = "ManagedIdentity"
    KEY = "Key"


class SubResource(ArmModel):
    """Reference to another subresource."""

    id: Optional[str] = Field(None, description="Resource ID.")


class Resource(ArmModel):
    """Common resource representation."""

    id: Optional[str] = Field(None, description="Resource ID.")
    name: Optional[str] = Field(None, description="Resource name.")
    type_: Optional[str] = Field(None, description="Resource type.", alias="type")
    location: Optional[str] = Field(None, description="Resource location.")
    tags: Optional[Dict[str, str]] = Field(None, description="Resource tags.")


class SystemData(ArmModel):
    """Metadata pertaining to creation and last modification of the resource."""

    created_by: Optional[str] = Field(None, alias="createdBy")
    created_by_type: Optional[CreatedByType] = Field(None, alias="createdByType")
    created_at: Optional[str] = Field(None, alias="createdAt")
    last_modified_by: Optional[str] = Field(None, alias="lastModifiedBy")
    last_modified_by_type: Optional[CreatedByType] = Field(
        None, alias="lastModifiedByType"
    )
    last_modified_at: Optional[str] = Field(None, alias="lastModifiedAt")


class ErrorAdditionalInfo(ArmModel):
    """The resource management error additional info."""

    type_: Optional[str] = Field(None, alias="type")
    info: Optional[Any] = None


class ErrorDetail(ArmModel):
    """The error detail."""

    code: Optional[str] = Field(None, description="The error code.")
    message: Optional[str] = Field(None, description="The error message.")
    target: Optional[str] = Field(None, description="The error target.")
    details: Optional[List["ErrorDetail"]] = None
    additional_info: Optional[List[ErrorAdditionalInfo]] = Field(
        None, alias="additionalInfo"
    )


class ErrorResponse(ArmModel):
    """Common error response for all Azure Resource Manager APIs."""

    error: Optional[ErrorDetail] = None


class CloudError(ArmModel):
    """An error response from the service."""

    error: Optional[ErrorDetail] = None
