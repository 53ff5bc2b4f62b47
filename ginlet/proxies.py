"""Trusted proxy networks and client address extraction from forwarding headers."""

from __future__ import annotations

import ipaddress
import re
from collections.abc import Iterable, Sequence

IPAddress = ipaddress.IPv4Address | ipaddress.IPv6Address
IPNetwork = ipaddress.IPv4Network | ipaddress.IPv6Network

DEFAULT_TRUSTED_PROXIES = ("0.0.0.0/0", "::/0")


def _parse_literal(text: str) -> IPAddress | None:
    if not isinstance(text, str) or "%" in text or "/" in text:
        return None
    try:
        return ipaddress.ip_address(text)
    except ValueError:
        return None


def parse_ip(ip: str) -> IPAddress | None:
    """Parse an address, folding IPv4-mapped IPv6 to IPv4; None if invalid."""
    parsed = _parse_literal(ip)
    if isinstance(parsed, ipaddress.IPv6Address) and parsed.ipv4_mapped is not None:
        return parsed.ipv4_mapped
    return parsed


def _parse_cidr(text: str) -> IPNetwork:
    address, _, prefix = text.partition("/")
    ip = _parse_literal(address)
    if ip is None or not re.fullmatch(r"[0-9]+", prefix) or int(prefix) > ip.max_prefixlen:
        raise ValueError(f"invalid CIDR address: {text}")
    return ipaddress.ip_network(f"{ip}/{int(prefix)}", strict=False)


def prepare_trusted_cidrs(trusted_proxies: Iterable[str] | None) -> list[IPNetwork] | None:
    """Turn addresses and CIDRs into networks; None stays None.

    Raises ValueError on the first entry that is neither.
    """
    if trusted_proxies is None:
        return None
    networks = []
    for proxy in trusted_proxies:
        if "/" not in proxy:
            ip = parse_ip(proxy)
            if ip is None:
                raise ValueError(f"invalid IP address: {proxy}")
            bits = 32 if isinstance(ip, ipaddress.IPv4Address) else 128
            proxy = f"{proxy}/{bits}"
        networks.append(_parse_cidr(proxy))
    return networks


def is_trusted(cidrs: Sequence[IPNetwork] | None, ip: str | IPAddress | None) -> bool:
    """Return True when ``ip`` lies inside one of ``cidrs``."""
    if cidrs is None or ip is None:
        return False
    if isinstance(ip, str):
        ip = parse_ip(ip)
        if ip is None:
            return False
    elif isinstance(ip, ipaddress.IPv6Address) and ip.ipv4_mapped is not None:
        ip = ip.ipv4_mapped
    return any(ip.version == net.version and ip in net for net in cidrs)


def validate_header(cidrs: Sequence[IPNetwork] | None, header: str) -> str | None:
    """Pick the client address from a forwarding header, or None.

    Entries are walked from the right; the first untrusted one (or the
    leftmost) is the client. A malformed entry ends the search.
    """
    if not header:
        return None
    items = header.split(",")
    for index in range(len(items) - 1, -1, -1):
        candidate = items[index].strip()
        ip = parse_ip(candidate)
        if ip is None:
            break
        if index == 0 or not is_trusted(cidrs, ip):
            return candidate
    return None