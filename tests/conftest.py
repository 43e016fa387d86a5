import json
from pathlib import Path
from typing import Any, Dict

import pytest
import yaml


# ============================================================================
# Environment isolation
# ============================================================================


@pytest.fixture(autouse=True)
def isolated_config_env(monkeypatch, tmp_path):
    """Keep tests away from the real ~/.config/arm-models and ARM_MODELS_* vars."""
    import os

    for key in list(os.environ):
        if key.startswith("ARM_MODELS_"):
            monkeypatch.delenv(key, raising=False)
    config_path = tmp_path / "arm-models" / "config.yaml"
    monkeypatch.setenv("ARM_MODELS_CONFIG_PATH", str(config_path))
    return config_path


# ============================================================================
# OpenAPI document fixtures
# ============================================================================


@pytest.fixture
def swagger_document() -> Dict[str, Any]:
    """A trimmed container registry / network style Swagger 2.0 document."""
    return {
        "swagger": "2.0",
        "info": {"title": "ContainerRegistryManagementClient", "version": "2019-05-01"},
        "securityDefinitions": {
            "azure_auth": {
                "type": "oauth2",
                "authorizationUrl": "https://login.microsoftonline.com/common/oauth2/authorize",
                "flow": "implicit",
                "description": "Azure Active Directory OAuth2 Flow",
                "scopes": {"user_impersonation": "impersonate your user account"},
            }
        },
        "definitions": {
            "QuarantinePolicy": {
                "type": "object",
                "properties": {
                    "status": {
                        "type": "string",
                        "description": "The value that indicates whether the policy is enabled or not.",
                        "enum": ["enabled", "disabled"],
                        "x-ms-enum": {"name": "PolicyStatus", "modelAsString": True},
                    }
                },
            },
            "TrustPolicy": {
                "type": "object",
                "properties": {
                    "type": {
                        "type": "string",
                        "enum": ["Notary"],
                        "x-ms-enum": {"name": "TrustPolicyType", "modelAsString": True},
                    },
                    "status": {
                        "type": "string",
                        "enum": ["enabled", "disabled"],
                        "x-ms-enum": {"name": "PolicyStatus", "modelAsString": True},
                    },
                },
            },
            "PlatformProperties": {
                "type": "object",
                "properties": {
                    "os": {
                        "type": "string",
                        "enum": ["Windows", "Linux"],
                        "x-ms-enum": {"name": "OS", "modelAsString": True},
                    },
                    "architecture": {
                        "type": "string",
                        "enum": ["amd64", "x86", "386", "arm", "arm64"],
                        "x-ms-enum": {"name": "Architecture", "modelAsString": True},
                    },
                },
            },
            "BgpPeerStatus": {
                "type": "object",
                "properties": {
                    "state": {
                        "type": "string",
                        "description": "The BGP peer state",
                        "enum": ["Unknown", "Stopped", "Idle", "Connecting", "Connected"],
                    }
                },
            },
            "WebhookProperties": {
                "type": "object",
                "properties": {
                    "actions": {
                        "type": "array",
                        "items": {
                            "type": "string",
                            "enum": ["push", "delete", "quarantine", "chart_push", "chart_delete"],
                            "x-ms-enum": {"name": "WebhookAction", "modelAsString": True},
                        },
                    }
                },
            },
            "ConnectionProtocol": {
                "type": "string",
                "description": "Gateway connection protocol.",
                "enum": ["IKEv2", "IKEv1"],
                "x-ms-enum": {
                    "name": "ConnectionProtocol",
                    "modelAsString": True,
                    "values": [
                        {"value": "IKEv2", "name": "IkeV2", "description": "IKE version 2"},
                        {"value": "IKEv1", "name": "IkeV1"},
                    ],
                },
            },
        },
        "parameters": {
            "ApiVersionParameter": {
                "name": "api-version",
                "in": "query",
                "required": True,
                "type": "string",
            },
            "GrantTypeParameter": {
                "name": "grant_type",
                "in": "formData",
                "type": "string",
                "enum": ["refresh_token", "password", "access_token"],
            },
        },
    }


@pytest.fixture
def swagger_json_file(tmp_path: Path, swagger_document) -> Path:
    path = tmp_path / "containerregistry.json"
    path.write_text(json.dumps(swagger_document))
    return path


@pytest.fixture
def swagger_yaml_file(tmp_path: Path, swagger_document) -> Path:
    path = tmp_path / "containerregistry.yaml"
    path.write_text(yaml.safe_dump(swagger_document))
    return path


# ============================================================================
# Wire payload fixtures
# ============================================================================


@pytest.fixture
def registry_payload() -> Dict[str, Any]:
    """A registry as returned by GET .../registries/{name}."""
    return {
        "id": "/subscriptions/00000000-0000-0000-0000-000000000000/resourceGroups/myResourceGroup/providers/Microsoft.ContainerRegistry/registries/myRegistry",
        "name": "myRegistry",
        "type": "Microsoft.ContainerRegistry/registries",
        "location": "westus",
        "tags": {"key": "value"},
        "sku": {"name": "Premium", "tier": "Premium"},
        "properties": {
            "loginServer": "myregistry.azurecr.io",
            "creationDate": "2021-06-15T21:38:26.1537861Z",
            "provisioningState": "Succeeded",
            "adminUserEnabled": False,
            "policies": {
                "quarantinePolicy": {"status": "disabled"},
                "trustPolicy": {"type": "Notary", "status": "disabled"},
                "retentionPolicy": {"days": 7, "status": "archived"},
            },
        },
    }


@pytest.fixture
def virtual_network_payload() -> Dict[str, Any]:
    return {
        "id": "/subscriptions/subid/resourceGroups/rg1/providers/Microsoft.Network/virtualNetworks/test-vnet",
        "name": "test-vnet",
        "type": "Microsoft.Network/virtualNetworks",
        "location": "eastus",
        "etag": 'W/"00000000-0000-0000-0000-000000000000"',
        "properties": {
            "addressSpace": {"addressPrefixes": ["10.0.0.0/16"]},
            "subnets": [
                {
                    "id": "/subscriptions/subid/resourceGroups/rg1/providers/Microsoft.Network/virtualNetworks/test-vnet/subnets/subnet1",
                    "name": "subnet1",
                    "properties": {
                        "addressPrefix": "10.0.0.0/24",
                        "provisioningState": "Succeeded",
                    },
                }
            ],
            "provisioningState": "Migrating",
            "enableDdosProtection": False,
        },
    }
