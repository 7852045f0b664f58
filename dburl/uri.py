#
# Copyright (c) 2026 dburl contributors
#
# This file is part of dburl.
#
# dburl is free software; you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License as
# published by the Free Software Foundation; either version 2.1 of
# the License, or (at your option) any later version.
#
# dburl is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.
#
"""Generic URI handling.

L{decompose} splits a URI into its RFC 3986 components without any
knowledge of databases, and the escaping helpers convert between
percent-encoded and plain text.
"""
import re

from urllib.parse import quote

from dburl.exceptions import (
    DecodeError, InvalidHostError, InvalidPortError, InvalidURIError)


MAX_PORT = 65535

_forbidden_re = re.compile(r"[\x00-\x20\x7f]")
_scheme_re = re.compile(r"([A-Za-z][A-Za-z0-9+.\-]*):")
_reg_name_re = re.compile(r"[A-Za-z0-9\-._~!$&'()*+,;=%]*\Z")
_ip_literal_re = re.compile(r"\[[A-Za-z0-9\-._~!$&'()*+,;=:%]+\]\Z")
_port_re = re.compile(r"[0-9]+\Z")
_hex_re = re.compile(r"[0-9A-Fa-f]{2}\Z")


class AbsoluteURI(object):
    """A URI carrying an authority component, as in C{scheme://host/path}.

    The protocol is C{None} for network-path references such as
    C{//host/path}.
    """

    __slots__ = ("protocol", "userinfo", "host", "port", "path", "query",
                 "fragment")

    def __init__(self, protocol, userinfo, host, port, path, query=None,
                 fragment=None):
        self.protocol = protocol
        self.userinfo = userinfo
        self.host = host
        self.port = port
        self.path = path
        self.query = query
        self.fragment = fragment


class RelativeURI(object):
    """A URI without an authority component."""

    __slots__ = ("protocol", "path", "query", "fragment")

    def __init__(self, protocol, path, query=None, fragment=None):
        self.protocol = protocol
        self.path = path
        self.query = query
        self.fragment = fragment


def decompose(uri_str):
    """Split a URI string into its components.

    @param uri_str: the text to split.
    @return: an L{AbsoluteURI} when the text has an authority component,
        a L{RelativeURI} otherwise.
    @raise InvalidURIError: the text is empty, contains whitespace or
        control characters, or has a colon in its first path segment
        without being a valid scheme.
    @raise InvalidHostError: the host is not a registered name or a
        bracketed IP literal.
    @raise InvalidPortError: the port is not a number between 0 and
        L{MAX_PORT}.
    """
    if not uri_str:
        raise InvalidURIError("Empty URI")
    if _forbidden_re.search(uri_str):
        raise InvalidURIError("URI contains whitespace or control characters")

    fragment = query = None
    if "#" in uri_str:
        uri_str, fragment = uri_str.split("#", 1)
    if "?" in uri_str:
        uri_str, query = uri_str.split("?", 1)

    match = _scheme_re.match(uri_str)
    if match:
        protocol = match.group(1)
        rest = uri_str[match.end():]
    else:
        protocol = None
        rest = uri_str
        if ":" in rest.split("/", 1)[0]:
            raise InvalidURIError("URI has an invalid scheme")

    if not rest.startswith("//"):
        return RelativeURI(protocol, rest, query, fragment)

    rest = rest[2:]
    slash = rest.find("/")
    if slash == -1:
        authority, path = rest, ""
    else:
        authority, path = rest[:slash], rest[slash:]

    userinfo = None
    if "@" in authority:
        userinfo, authority = authority.rsplit("@", 1)

    host, port = _split_host_port(authority)
    return AbsoluteURI(protocol, userinfo, host, port, path, query, fragment)


def _split_host_port(hostport):
    if hostport.startswith("["):
        end = hostport.find("]")
        if end == -1:
            raise InvalidHostError(hostport)
        host, rest = hostport[:end+1], hostport[end+1:]
        if not _ip_literal_re.match(host):
            raise InvalidHostError(host)
        if rest and not rest.startswith(":"):
            raise InvalidHostError(hostport)
        port = rest[1:]
    else:
        host, _, port = hostport.partition(":")
        if not _reg_name_re.match(host):
            raise InvalidHostError(host)
    if not port:
        return host, None
    if not _port_re.match(port) or int(port) > MAX_PORT:
        raise InvalidPortError(port)
    return host, int(port)


def percent_decode(s):
    """Decode every C{%XX} escape in C{s}.

    Runs of decoded bytes are reassembled as UTF-8 text.

    @raise DecodeError: an escape is malformed or the decoded bytes are
        not valid UTF-8.
    """
    if "%" not in s:
        return s
    i = 0
    j = s.find("%")
    r = bytearray()
    while j != -1:
        r += s[i:j].encode("utf-8", "surrogatepass")
        i = j+3
        code = s[j+1:i]
        if not _hex_re.match(code):
            raise DecodeError("Malformed percent escape at offset %d" % j)
        r.append(int(code, 16))
        j = s.find("%", i)
    r += s[i:].encode("utf-8", "surrogatepass")
    try:
        return r.decode("utf-8")
    except UnicodeDecodeError:
        raise DecodeError("Percent escapes do not decode to UTF-8")


def unescape(s):
    """Best-effort L{percent_decode}, returning C{s} itself on failure."""
    try:
        return percent_decode(s)
    except DecodeError:
        return s


def escape(s, safe=""):
    return quote(s, safe=safe)


def parse_options(query):
    """Map a query string to an ordered dict of options.

    Keys without C{=} get an empty value and later duplicates overwrite
    earlier ones.
    """
    options = {}
    if not query:
        return options
    for pair in query.split("&"):
        # Empty pairs, as in "a=1&&b=2" or a trailing "&", carry no option.
        if not pair:
            continue
        key, _, value = pair.partition("=")
        options[unescape(key)] = unescape(value)
    return options
