"""
Tests for open enum decoding and encoding.

Covers known values, fallback values carrying unrecognized strings, the
lowercase alias variant and the pydantic field integration.
"""

import copy
import json
import pickle
from concurrent.futures import ThreadPoolExecutor

import pytest
from pydantic import ValidationError

from arm_models import UNKNOWN_VALUE, OpenEnum, decode, encode, is_known
from arm_models.containerregistry import (
    Architecture,
    Os,
    PlatformProperties,
    QuarantinePolicy,
    Status,
    WebhookAction,
)
from arm_models.network import ConnectionProtocol, SecurityRuleProtocol

WIRE_SAMPLES = [
    "enabled",
    "disabled",
    "archived",
    "",
    "Enabled",
    "ENABLED",
    " enabled ",
    "ünïcödé",
    "enabled\n",
]


class TestKnownValues:
    """Declared wire strings decode to their members."""

    def test_decode_known_returns_member(self):
        assert decode(Status, "enabled") is Status.ENABLED
        assert decode(Status, "disabled") is Status.DISABLED

    def test_encode_known_returns_declared_string(self):
        assert encode(Status.ENABLED) == "enabled"
        assert encode(Status.DISABLED) == "disabled"

    def test_known_member_reports_known(self):
        assert Status.ENABLED.is_known
        assert is_known(Status.DISABLED)

    def test_symbol_differs_from_wire(self):
        assert Architecture.N386.name == "N386"
        assert decode(Architecture, "386") is Architecture.N386
        assert encode(Architecture.N386) == "386"

    def test_punctuation_wire_values(self):
        assert decode(SecurityRuleProtocol, "*") is SecurityRuleProtocol.ANY
        assert decode(ConnectionProtocol, "IKEv2") is ConnectionProtocol.IKEV2
        assert decode(WebhookAction, "chart_push") is WebhookAction.CHART_PUSH

    def test_known_values_in_declaration_order(self):
        assert Status.known_values() == ("enabled", "disabled")
        assert Architecture.known_values() == ("amd64", "x86", "386", "arm", "arm64")

    def test_str_is_wire_string(self):
        assert str(Status.ENABLED) == "enabled"
        assert f"{Architecture.N386}" == "386"


class TestFallbackValues:
    """Unrecognized wire strings survive as fallback members."""

    def test_unknown_becomes_fallback(self):
        archived = decode(Status, "archived")

        assert isinstance(archived, Status)
        assert archived.name == UNKNOWN_VALUE
        assert archived.value == "archived"
        assert not archived.is_known
        assert not is_known(archived)

    def test_fallback_encodes_exact_string(self):
        assert encode(decode(Status, "archived")) == "archived"

    def test_empty_string_is_fallback(self):
        empty = decode(Status, "")

        assert not empty.is_known
        assert encode(empty) == ""

    def test_matching_is_case_sensitive(self):
        upper = decode(Status, "Enabled")

        assert not upper.is_known
        assert encode(upper) == "Enabled"
        assert upper != Status.ENABLED

    def test_fallback_is_not_registered(self):
        decode(Status, "archived")

        assert len(Status) == 2
        assert "archived" not in Status._value2member_map_
        assert Status.known_values() == ("enabled", "disabled")

    def test_fallbacks_compare_by_wire_string(self):
        first = decode(Status, "archived")
        second = decode(Status, "archived")

        assert first == second
        assert first is not second
        assert first != decode(Status, "retired")
        assert len({first, second}) == 1

    def test_unknown_value_constructor(self):
        value = Status.unknown_value("enabled")

        assert not value.is_known
        assert encode(value) == "enabled"
        assert decode(Status, "archived") == Status.unknown_value("archived")

    def test_repr_names_fallback(self):
        assert UNKNOWN_VALUE in repr(decode(Status, "archived"))

    def test_fallback_str(self):
        assert str(decode(Status, "archived")) == "archived"

    def test_fallback_survives_pickle(self):
        archived = decode(Status, "archived")
        restored = pickle.loads(pickle.dumps(archived))

        assert restored == archived
        assert not restored.is_known

    def test_known_member_survives_copy(self):
        assert copy.deepcopy(Status.ENABLED) is Status.ENABLED


class TestCodecProperties:
    """Properties that hold for every string."""

    @pytest.mark.parametrize("wire", WIRE_SAMPLES)
    def test_encode_inverts_decode(self, wire):
        assert encode(decode(Status, wire)) == wire

    @pytest.mark.parametrize("wire", WIRE_SAMPLES)
    def test_decode_is_idempotent(self, wire):
        assert decode(Status, encode(decode(Status, wire))) == decode(Status, wire)

    @pytest.mark.parametrize("wire", WIRE_SAMPLES)
    def test_known_iff_declared(self, wire):
        assert decode(Status, wire).is_known == (wire in Status.known_values())

    def test_members_decode_to_themselves(self):
        for enum_type in (Status, Architecture, SecurityRuleProtocol, WebhookAction):
            for member in enum_type:
                assert decode(enum_type, encode(member)) is member

    def test_concurrent_decoding(self):
        values = ["enabled", "archived", "disabled", ""] * 250

        with ThreadPoolExecutor(max_workers=8) as pool:
            decoded = list(pool.map(lambda wire: decode(Status, wire), values))

        assert [encode(value) for value in decoded] == values
        assert len(Status) == 2


class TestLowercaseAlias:
    """Enums that also accept lowercased spellings."""

    def test_exact_spelling(self):
        assert decode(Os, "Linux") is Os.LINUX

    def test_lowercase_spelling_maps_to_member(self):
        assert decode(Os, "linux") is Os.LINUX
        assert decode(Os, "windows") is Os.WINDOWS

    def test_encode_uses_declared_spelling(self):
        assert encode(decode(Os, "linux")) == "Linux"

    def test_other_casings_are_fallbacks(self):
        shouting = decode(Os, "LINUX")

        assert not shouting.is_known
        assert encode(shouting) == "LINUX"

    def test_plain_open_enum_has_no_alias(self):
        assert not decode(Architecture, "AMD64").is_known


class TestFieldIntegration:
    """Open enums used as record fields."""

    def test_field_decodes_known(self):
        policy = QuarantinePolicy.from_wire({"status": "enabled"})

        assert policy.status is Status.ENABLED

    def test_field_keeps_unknown(self):
        policy = QuarantinePolicy.from_wire({"status": "archived"})

        assert policy.status.name == UNKNOWN_VALUE
        assert policy.to_wire() == {"status": "archived"}

    def test_field_accepts_member(self):
        policy = QuarantinePolicy(status=Status.DISABLED)

        assert policy.to_wire() == {"status": "disabled"}

    def test_python_dump_keeps_member(self):
        policy = QuarantinePolicy(status=Status.ENABLED)

        assert policy.model_dump()["status"] is Status.ENABLED

    def test_field_rejects_non_string(self):
        with pytest.raises(ValidationError):
            QuarantinePolicy.from_wire({"status": 5})

    def test_required_field_with_unknown_value(self):
        platform = PlatformProperties.from_wire({"os": "Plan9", "architecture": "riscv64"})

        assert not platform.os.is_known
        assert platform.to_wire() == {"os": "Plan9", "architecture": "riscv64"}

    def test_json_schema_marks_enum_open(self):
        schema = QuarantinePolicy.model_json_schema()

        assert '"modelAsString": true' in json.dumps(schema)

    def test_subclass_is_str(self):
        assert isinstance(Status.ENABLED, str)
        assert issubclass(Status, OpenEnum)
