# tests/test_remote_source.py
import ipaddress

import pytest

from myip.core.errors import FamilyMismatchError, NoProvidersError, RaceTimeoutError
from myip.core.models import Family, Origin, ResolverConfig
from myip.source.remote import RemoteAddressSource
from tests.conftest import ScriptedProbe, endpoints


def remote_source(script, ipv4=(), ipv6=(), timeout=2.0):
    return RemoteAddressSource(
        ipv4_endpoints=endpoints(*ipv4, family=Family.IPV4),
        ipv6_endpoints=endpoints(*ipv6, family=Family.IPV6),
        race_timeout=timeout,
        probe=ScriptedProbe(script),
    )


def test_ipv4_lookup_returns_single_candidate():
    source = remote_source({"https://v4": (0.0, "192.168.22.1")}, ipv4=["https://v4"])

    candidates = source.get_ipv4_addresses()

    assert candidates.addresses == [ipaddress.ip_address("192.168.22.1")]
    assert candidates.family is Family.IPV4
    assert candidates.origin is Origin.REMOTE


def test_ipv6_lookup_returns_single_candidate():
    source = remote_source({
        "https://v6a": (0.0, None),
        "https://v6b": (0.01, "2001:db8::42"),
    }, ipv6=["https://v6a", "https://v6b"])

    assert source.get_ipv6_addresses().addresses == [ipaddress.ip_address("2001:db8::42")]


def test_ipv4_lookup_rejects_ipv6_answer():
    source = remote_source({"https://v4": (0.0, "2001:0db8:0000:0042:0000:8a2e:0370:7334")}, ipv4=["https://v4"])

    with pytest.raises(FamilyMismatchError, match="not an IPv4 address"):
        source.get_ipv4_addresses()


def test_ipv6_lookup_rejects_ipv4_answer():
    source = remote_source({"https://v6": (0.0, "192.168.22.1")}, ipv6=["https://v6"])

    with pytest.raises(FamilyMismatchError, match="not an IPv6 address"):
        source.get_ipv6_addresses()


def test_families_use_their_own_providers():
    script = {
        "https://v4": (0.0, "198.51.100.4"),
        "https://v6": (0.0, "2001:db8::6"),
    }
    source = remote_source(script, ipv4=["https://v4"], ipv6=["https://v6"])

    assert source.get_ipv4_addresses().addresses == [ipaddress.ip_address("198.51.100.4")]
    assert source.get_ipv6_addresses().addresses == [ipaddress.ip_address("2001:db8::6")]
    assert source._race.probe.started == ["https://v4", "https://v6"]


def test_family_without_providers_fails():
    source = remote_source({}, ipv4=[])
    with pytest.raises(NoProvidersError):
        source.get_ipv4_addresses()


def test_race_timeout_is_applied():
    source = remote_source({"https://v4": (5.0, "10.0.0.1")}, ipv4=["https://v4"], timeout=0.1)
    with pytest.raises(RaceTimeoutError):
        source.get_ipv4_addresses()


def test_from_config_builds_pinned_endpoints():
    config = ResolverConfig(
        origin=Origin.REMOTE,
        race_timeout=3.0,
        probe_timeout=1.5,
        ipv4_urls=["https://a4", "https://b4"],
        ipv6_urls=["https://a6"],
    )

    source = RemoteAddressSource.from_config(config)

    assert [e.url for e in source.ipv4_endpoints] == ["https://a4", "https://b4"]
    assert all(e.family is Family.IPV4 and e.timeout == 1.5 for e in source.ipv4_endpoints)
    assert [e.url for e in source.ipv6_endpoints] == ["https://a6"]
    assert source.ipv6_endpoints[0].family is Family.IPV6
    assert source.race_timeout == 3.0


def test_default_config_has_providers_for_both_families():
    config = ResolverConfig(origin=Origin.REMOTE)
    assert config.ipv4_endpoints()
    assert config.ipv6_endpoints()
    assert config.race_timeout > config.probe_timeout
