"""Client IP address normalisation."""

import ipaddress


def normalize_ip_address(ip: str | None, override_ip: str | None = None) -> str | None:
    """Return an IP address usable for geolocation, or None.

    A configured override replaces the client address. Empty, malformed and
    loopback addresses are never meaningful geolocation targets and yield None.
    """
    if override_ip:
        ip = override_ip

    if not ip:
        return None

    candidate = ip.strip()
    try:
        parsed = ipaddress.ip_address(candidate)
    except ValueError:
        return None

    if parsed.is_loopback:
        return None

    # Dual-stack sockets report local IPv4 clients as ::ffff:127.0.0.1
    if isinstance(parsed, ipaddress.IPv6Address):
        mapped = parsed.ipv4_mapped
        if mapped is not None and mapped.is_loopback:
            return None

    return candidate
