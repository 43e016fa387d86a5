"""Network resource provider records (Microsoft.Network)."""

from typing import Annotated, ClassVar, List, Optional

from pydantic import Field

from .common import ErrorDetail, ProvisioningState, Resource, SubResource
from .open_enum import OpenEnum
from .paging import Continuable
from .records import ArmModel, Flatten


class OperationStatus(OpenEnum):
    """Status of the Azure async operation."""

    IN_PROGRESS = "InProgress"
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"


class BgpPeerState(OpenEnum):
    """The BGP peer state."""

    UNKNOWN = "Unknown"
    STOPPED = "Stopped"
    IDLE = "Idle"
    CONNECTING = "Connecting"
    CONNECTED = "Connected"


class ConnectionProtocol(OpenEnum):
    """Gateway connection protocol."""

    IKEV2 = "IKEv2"
    IKEV1 = "IKEv1"


class SecurityRuleProtocol(OpenEnum):
    """Network protocol this rule applies to."""

    TCP = "Tcp"
    UDP = "Udp"
    ICMP = "Icmp"
    ESP = "Esp"
    ANY = "*"
    AH = "Ah"


class SecurityRuleAccess(OpenEnum):
    """Whether network traffic is allowed or denied."""

    ALLOW = "Allow"
    DENY = "Deny"


class SecurityRuleDirection(OpenEnum):
    """The direction of the rule."""

    INBOUND = "Inbound"
    OUTBOUND = "Outbound"


class IpAllocationMethod(OpenEnum):
    """IP address allocation method."""

    STATIC = "Static"
    DYNAMIC = "Dynamic"


class IpVersion(OpenEnum):
    """IP address version."""

    IPV4 = "IPv4"
    IPV6 = "IPv6"


class PublicIpAddressSkuName(OpenEnum):
    """Name of a public IP address SKU."""

    BASIC = "Basic"
    STANDARD = "Standard"


class AddressSpace(ArmModel):
    """
    Array of IP address ranges that can be used by subnets of the virtual
    network.
    """

    address_prefixes: Optional[List[str]] = Field(
        None,
        description="A list of address blocks reserved for this virtual network in CIDR notation.",
        alias="addressPrefixes",
    )


class ApplicationSecurityGroupPropertiesFormat(ArmModel):
    """Application security group properties."""

    resource_guid: Optional[str] = Field(None, alias="resourceGuid")
    provisioning_state: Optional[ProvisioningState] = Field(
        None, alias="provisioningState"
    )


class ApplicationSecurityGroup(ArmModel):
    """An application security group in a resource group."""

    resource: Annotated[Resource, Flatten()] = Field(default_factory=Resource)
    properties: Optional[ApplicationSecurityGroupPropertiesFormat] = None
    etag: Optional[str] = Field(
        None,
        description="A unique read-only string that changes whenever the resource is updated.",
    )


class AzureAsyncOperationResult(ArmModel):
    """
    Status of an asynchronous operation.

    Distinct from the HTTP status code of the Get Operation Status call
    itself.
    """

    status: Optional[OperationStatus] = None
    error: Optional[ErrorDetail] = None


class BackendAddressPoolPropertiesFormat(ArmModel):
    backend_ip_configurations: Optional[List[SubResource]] = Field(
        None, alias="backendIPConfigurations"
    )
    load_balancing_rules: Optional[List[SubResource]] = Field(
        None, alias="loadBalancingRules"
    )
    outbound_rule: Optional[SubResource] = Field(None, alias="outboundRule")
    outbound_rules: Optional[List[SubResource]] = Field(None, alias="outboundRules")
    provisioning_state: Optional[ProvisioningState] = Field(
        None, alias="provisioningState"
    )


class BackendAddressPool(ArmModel):
    """Pool of backend IP addresses."""

    sub_resource: Annotated[SubResource, Flatten()] = Field(
        default_factory=SubResource
    )
    properties: Optional[BackendAddressPoolPropertiesFormat] = None
    name: Optional[str] = None
    etag: Optional[str] = None
    type_: Optional[str] = Field(None, alias="type")


class BgpPeerStatus(ArmModel):
    """BGP peer status details."""

    local_address: Optional[str] = Field(None, alias="localAddress")
    neighbor: Optional[str] = None
    asn: Optional[int] = None
    state: Optional[BgpPeerState] = None
    connected_duration: Optional[str] = Field(None, alias="connectedDuration")
    routes_received: Optional[int] = Field(None, alias="routesReceived")
    messages_sent: Optional[int] = Field(None, alias="messagesSent")
    messages_received: Optional[int] = Field(None, alias="messagesReceived")


class BgpPeerStatusListResult(Continuable, ArmModel):
    """Response for list BGP peer status API service call."""

    continuation_field: ClassVar[Optional[str]] = None

    value: Optional[List[BgpPeerStatus]] = None


class BgpSettings(ArmModel):
    asn: Optional[int] = Field(None, description="The BGP speaker's ASN.")
    bgp_peering_address: Optional[str] = Field(None, alias="bgpPeeringAddress")
    peer_weight: Optional[int] = Field(None, alias="peerWeight")


class ConnectionResetSharedKey(ArmModel):
    """The virtual network connection reset shared key."""

    key_length: int = Field(
        ...,
        description="The virtual network connection reset shared key length, should between 1 and 128.",
        alias="keyLength",
    )


class SecurityRulePropertiesFormat(ArmModel):
    description: Optional[str] = None
    protocol: SecurityRuleProtocol = Field(..., description="Network protocol this rule applies to.")
    source_port_range: Optional[str] = Field(None, alias="sourcePortRange")
    destination_port_range: Optional[str] = Field(None, alias="destinationPortRange")
    source_address_prefix: Optional[str] = Field(None, alias="sourceAddressPrefix")
    source_address_prefixes: Optional[List[str]] = Field(
        None, alias="sourceAddressPrefixes"
    )
    destination_address_prefix: Optional[str] = Field(
        None, alias="destinationAddressPrefix"
    )
    destination_address_prefixes: Optional[List[str]] = Field(
        None, alias="destinationAddressPrefixes"
    )
    access: SecurityRuleAccess
    priority: Optional[int] = None
    direction: SecurityRuleDirection
    provisioning_state: Optional[ProvisioningState] = Field(
        None, alias="provisioningState"
    )


class SecurityRule(ArmModel):
    """Network security rule."""

    sub_resource: Annotated[SubResource, Flatten()] = Field(
        default_factory=SubResource
    )
    properties: Optional[SecurityRulePropertiesFormat] = None
    name: Optional[str] = None
    etag: Optional[str] = None


class NetworkSecurityGroupPropertiesFormat(ArmModel):
    security_rules: Optional[List[SecurityRule]] = Field(None, alias="securityRules")
    default_security_rules: Optional[List[SecurityRule]] = Field(
        None, alias="defaultSecurityRules"
    )
    subnets: Optional[List[SubResource]] = None
    resource_guid: Optional[str] = Field(None, alias="resourceGuid")
    provisioning_state: Optional[ProvisioningState] = Field(
        None, alias="provisioningState"
    )


class NetworkSecurityGroup(ArmModel):
    """NetworkSecurityGroup resource."""

    resource: Annotated[Resource, Flatten()] = Field(default_factory=Resource)
    properties: Optional[NetworkSecurityGroupPropertiesFormat] = None
    etag: Optional[str] = None


class SubnetPropertiesFormat(ArmModel):
    address_prefix: Optional[str] = Field(None, alias="addressPrefix")
    address_prefixes: Optional[List[str]] = Field(None, alias="addressPrefixes")
    network_security_group: Optional[NetworkSecurityGroup] = Field(
        None, alias="networkSecurityGroup"
    )
    route_table: Optional[SubResource] = Field(None, alias="routeTable")
    provisioning_state: Optional[ProvisioningState] = Field(
        None, alias="provisioningState"
    )


class Subnet(ArmModel):
    """Subnet in a virtual network resource."""

    sub_resource: Annotated[SubResource, Flatten()] = Field(
        default_factory=SubResource
    )
    properties: Optional[SubnetPropertiesFormat] = None
    name: Optional[str] = None
    etag: Optional[str] = None


class VirtualNetworkPropertiesFormat(ArmModel):
    address_space: Optional[AddressSpace] = Field(None, alias="addressSpace")
    subnets: Optional[List[Subnet]] = None
    resource_guid: Optional[str] = Field(None, alias="resourceGuid")
    enable_ddos_protection: Optional[bool] = Field(None, alias="enableDdosProtection")
    provisioning_state: Optional[ProvisioningState] = Field(
        None, alias="provisioningState"
    )


class VirtualNetwork(ArmModel):
    """Virtual Network resource."""

    resource: Annotated[Resource, Flatten()] = Field(default_factory=Resource)
    properties: Optional[VirtualNetworkPropertiesFormat] = None
    etag: Optional[str] = None


class VirtualNetworkListResult(Continuable, ArmModel):
    """Response for the ListVirtualNetworks API service call."""

    value: Optional[List[VirtualNetwork]] = None
    next_link: Optional[str] = Field(None, alias="nextLink")


class PublicIpAddressSku(ArmModel):
    name: Optional[PublicIpAddressSkuName] = None


class PublicIpAddressPropertiesFormat(ArmModel):
    public_ip_allocation_method: Optional[IpAllocationMethod] = Field(
        None, alias="publicIPAllocationMethod"
    )
    public_ip_address_version: Optional[IpVersion] = Field(
        None, alias="publicIPAddressVersion"
    )
    ip_address: Optional[str] = Field(None, alias="ipAddress")
    idle_timeout_in_minutes: Optional[int] = Field(None, alias="idleTimeoutInMinutes")
    resource_guid: Optional[str] = Field(None, alias="resourceGuid")
    provisioning_state: Optional[ProvisioningState] = Field(
        None, alias="provisioningState"
    )


class PublicIpAddress(ArmModel):
    """Public IP address resource."""

    resource: Annotated[Resource, Flatten()] = Field(default_factory=Resource)
    sku: Optional[PublicIpAddressSku] = None
    properties: Optional[PublicIpAddressPropertiesFormat] = None
    etag: Optional[str] = None
    zones: Optional[List[str]] = None


class PublicIpAddressListResult(Continuable, ArmModel):
    value: Optional[List[PublicIpAddress]] = None
    next_link: Optional[str] = Field(None, alias="nextLink")
