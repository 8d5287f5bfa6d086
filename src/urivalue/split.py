"""src/urivalue/split.py

Generic URI splitter for Urivalue.

Splits a string into scheme, userinfo, host, port, path, query and fragment
following the generic syntax of RFC 3986 (Appendix B). Components are kept
verbatim: nothing is lower-cased or percent-decoded. Missing components are
returned as empty strings.
"""

import re
from typing import NamedTuple, Tuple

from urivalue.exceptions import MalformedUri

__all__ = ["UriParts", "split_uri"]

_SPLIT_MATCH = re.compile(
    r"^(([A-Za-z][A-Za-z0-9+.\-]*):)?(//([^/?#]*))?([^?#]*)(\?([^#]*))?(#(.*))?",
    re.DOTALL,
).match
_PORT_MATCH = re.compile(r"[0-9]+\Z").match

MAX_PORT = 65535


class UriParts(NamedTuple):
    """Components of a split URI. Absent components are empty strings."""

    scheme: str = ""
    username: str = ""
    password: str = ""
    host: str = ""
    port: str = ""
    path: str = ""
    query: str = ""
    fragment: str = ""


def _malformed(reason: str) -> MalformedUri:
    return MalformedUri(f"The given URI is not well formed: {reason}")


def _split_host_port(hostport: str) -> Tuple[str, str]:
    if hostport.startswith("["):
        end = hostport.find("]")
        if end == -1:
            raise _malformed("unbalanced '[' in host")
        host, rest = hostport[: end + 1], hostport[end + 1 :]
        if "[" in host[1:] or "]" in rest:
            raise _malformed("unexpected bracket in host")
        if rest and not rest.startswith(":"):
            raise _malformed("unexpected text after bracketed host")
        return host, rest[1:]

    if "[" in hostport or "]" in hostport:
        raise _malformed("unexpected bracket in host")
    host, _, port = hostport.partition(":")
    return host, port


def split_uri(text: str) -> UriParts:
    """
    Split a URI string into its components.

    Args:
        text: URI string, absolute or relative. May be empty.

    Returns:
        UriParts with every component as a string.

    Raises:
        MalformedUri: If the authority cannot be split (unbalanced brackets,
            invalid port).
    """
    if not isinstance(text, str):
        raise TypeError(f"URI must be a string, not {type(text).__name__}")

    # The pattern accepts any string, so only the authority can be rejected.
    match = _SPLIT_MATCH(text)
    if match is None:
        raise _malformed("no generic URI syntax match")
    g = match.groups()
    scheme, authority, path = g[1] or "", g[3] or "", g[4]
    query, fragment = g[6] or "", g[8] or ""

    username = password = ""
    userinfo, at, hostport = authority.rpartition("@")
    if at:
        username, _, password = userinfo.partition(":")

    host, port = _split_host_port(hostport)
    if port:
        if not _PORT_MATCH(port):
            raise _malformed(f"invalid port {port!r}")
        if int(port) > MAX_PORT:
            raise _malformed(f"port {port} out of range")

    return UriParts(
        scheme=scheme,
        username=username,
        password=password,
        host=host,
        port=port,
        path=path,
        query=query,
        fragment=fragment,
    )
