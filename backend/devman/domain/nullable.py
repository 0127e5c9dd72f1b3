"""Conversions between wire scalars and storage nullable values.

Every helper here is lenient: malformed input becomes ``None`` ("no value")
instead of raising. Callers treat ``None`` as "filter not applied" for query
parameters and as "field not set" for payload fields. This module is the only
place that policy is implemented.
"""

from __future__ import annotations

import ipaddress
import re
from datetime import datetime
from typing import Optional, Union

from devman.core.logging import get_logger
from devman.core.time import from_unix_millis

logger = get_logger(__name__)

Network = Union[ipaddress.IPv4Network, ipaddress.IPv6Network]

TRUE_VALUES = frozenset({"1", "t", "true", "y", "yes", "on"})
FALSE_VALUES = frozenset({"0", "f", "false", "n", "no", "off"})

_INTEGER = re.compile(r"[+-]?[0-9]+")
_MAC_GROUPED = re.compile(r"^[0-9A-Fa-f]{2}([:-])[0-9A-Fa-f]{2}(?:\1[0-9A-Fa-f]{2})*$")
_MAC_DOTTED = re.compile(r"^[0-9A-Fa-f]{4}(?:\.[0-9A-Fa-f]{4})+$")
MAC_OCTETS = 6


def try_parse_int(
    value: Optional[str], default: Optional[int] = None, bits: int = 64
) -> Optional[int]:
    """Parse a base-10 integer, returning ``default`` when that is not possible.

    The result must fit a signed integer of ``bits`` width. Surrounding
    whitespace is not accepted.
    """
    if value is None or value == "":
        return default
    if not _INTEGER.fullmatch(value):
        logger.debug("Parse integer %r - not a base-10 integer", value)
        return default
    number = int(value)
    bound = 1 << (bits - 1)
    if not -bound <= number < bound:
        logger.debug("Parse integer %r - out of %d-bit range", value, bits)
        return default
    return number


def try_parse_millis(value: Optional[str]) -> Optional[datetime]:
    """Parse Unix epoch milliseconds into a UTC timestamp; ``None`` on failure."""
    millis = try_parse_int(value)
    if millis is None:
        return None
    try:
        return from_unix_millis(millis)
    except OverflowError as exc:
        logger.debug("Timestamp %r out of range - %s", value, exc)
        return None


def try_parse_bool(value: Optional[str]) -> Optional[bool]:
    """Parse common boolean spellings; ``None`` for anything else."""
    if value is None:
        return None
    lowered = value.strip().lower()
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False
    logger.debug("Parse boolean %r - unrecognized value", value)
    return None


def to_network(value: Optional[str]) -> Optional[Network]:
    """Parse an address or CIDR block into a network.

    A bare address becomes a host route: ``/32`` when it looks like dotted
    decimal, ``/128`` otherwise. Host bits are cleared as with CIDR notation,
    so ``10.0.0.5/24`` becomes ``10.0.0.0/24``.
    """
    if value is None:
        return None
    text = value.strip()
    if not text:
        return None
    if "/" not in text:
        text += "/32" if "." in text else "/128"
    try:
        return ipaddress.ip_network(text, strict=False)
    except ValueError as exc:
        logger.debug("Parse network %r - %s", value, exc)
        return None


def network_to_str(value: Optional[Network]) -> Optional[str]:
    """Render a stored network (or host route) as CIDR text."""
    if value is None:
        return None
    return str(value)


def to_mac(value: Optional[str]) -> Optional[str]:
    """Parse a hardware address into canonical ``aa:bb:cc:dd:ee:ff`` form.

    Accepts colon- or hyphen-delimited octets and Cisco-style dotted groups
    (``aabb.ccdd.eeff``) for 48-bit addresses.
    """
    if value is None:
        return None
    text = value.strip()
    if _MAC_GROUPED.match(text):
        octets = re.split(r"[:-]", text)
    elif _MAC_DOTTED.match(text):
        digits = text.replace(".", "")
        octets = [digits[i : i + 2] for i in range(0, len(digits), 2)]
    else:
        if text:
            logger.debug("Parse MAC %r - unrecognized format", value)
        return None
    if len(octets) != MAC_OCTETS:
        logger.debug("Parse MAC %r - unsupported length %d", value, len(octets))
        return None
    return ":".join(octet.lower() for octet in octets)


def to_nullable_str(value: Optional[str], *, empty_as_none: bool = False) -> Optional[str]:
    """Wire optional string to storage nullable string.

    An empty string is a real value unless the call site asks for
    ``empty_as_none``.
    """
    if value is None:
        return None
    if empty_as_none and value == "":
        return None
    return value


def to_nullable_int(value: Optional[int], *, zero_as_none: bool = False) -> Optional[int]:
    """Wire optional integer to storage nullable integer."""
    if value is None:
        return None
    if zero_as_none and value == 0:
        return None
    return int(value)
