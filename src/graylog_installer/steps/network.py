"""External address detection."""

import ipaddress

# Docker bridge pools and the VirtualBox NAT guest address
EXCLUDED_NETWORKS = (
    ipaddress.IPv4Network("172.16.0.0/12"),
    ipaddress.IPv4Network("10.0.2.15/32"),
)


def candidate_external_addresses(addresses: list[str]) -> list[str]:
    """Filter host addresses down to the ones reachable from outside.

    Drops loopback, link-local, unparseable entries and the excluded
    virtualization networks. Order is preserved.
    """
    candidates: list[str] = []
    for raw in addresses:
        try:
            address = ipaddress.IPv4Address(raw)
        except ipaddress.AddressValueError:
            continue
        if address.is_loopback or address.is_link_local:
            continue
        if any(address in network for network in EXCLUDED_NETWORKS):
            continue
        candidates.append(raw)
    return candidates


def guess_external_address(addresses: list[str]) -> str:
    """Return the first candidate external address, or "" if none remains."""
    candidates = candidate_external_addresses(addresses)
    return candidates[0] if candidates else ""
