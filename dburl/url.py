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
"""Database URL values.

Strict parsing produces L{PostgreSQL}, L{MySQL}, L{Other} or L{SQLite};
partial parsing produces the C{Partial*} counterparts of the server
variants, whose host, port, user and database may be C{None}. SQLite is
the same in both modes.
"""
from dburl.uri import escape


class NoAuthType(object):

    def __repr__(self):
        return "NoAuth"

    def __reduce__(self):
        return "NoAuth"


NoAuth = NoAuthType()


class Value(object):
    """Immutable record built from C{_fields}.

    Fields may be given positionally or by keyword. Missing fields fall
    back to the factories in C{_defaults}.
    """

    __slots__ = ()

    _fields = ()
    _defaults = {}

    def __init__(self, *args, **kwargs):
        name = type(self).__name__
        if len(args) > len(self._fields):
            raise TypeError("%s takes at most %d arguments (%d given)"
                            % (name, len(self._fields), len(args)))
        values = dict(zip(self._fields, args))
        for field, value in kwargs.items():
            if field not in self._fields:
                raise TypeError("%s got an unexpected argument %r"
                                % (name, field))
            if field in values:
                raise TypeError("%s got multiple values for argument %r"
                                % (name, field))
            values[field] = value
        for field in self._fields:
            if field in values:
                value = values[field]
            elif field in self._defaults:
                value = self._defaults[field]()
            else:
                raise TypeError("%s missing argument %r" % (name, field))
            object.__setattr__(self, field, value)

    def __setattr__(self, name, value):
        raise AttributeError("%s is immutable" % type(self).__name__)

    def __delattr__(self, name):
        raise AttributeError("%s is immutable" % type(self).__name__)

    def __reduce__(self):
        return (type(self), self._values())

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self._values() == other._values()

    def __hash__(self):
        return hash((type(self),) + self._values())

    def __repr__(self):
        return "%s(%s)" % (
            type(self).__name__,
            ", ".join("%s=%r" % (field, getattr(self, field))
                      for field in self._fields))

    def _values(self):
        return tuple(getattr(self, field) for field in self._fields)

    def replace(self, **changes):
        """Return a copy of this value with some fields changed."""
        values = dict(zip(self._fields, self._values()))
        values.update(changes)
        return type(self)(**values)


class Password(Value):

    __slots__ = _fields = ("password",)

    def __repr__(self):
        return "Password('***')"


def _format_options(options):
    return "&".join("%s=%s" % (escape(key), escape(value))
                    for key, value in options.items())


class ServerURL(Value):
    """Common base of the URLs pointing at a database server."""

    __slots__ = ()

    protocol = None

    _fields = ("host", "port", "user", "auth", "database", "options")
    _defaults = {"auth": lambda: NoAuth, "options": dict}

    def __str__(self):
        url = [self.protocol, "://"]
        if self.user is not None or self.auth is not NoAuth:
            url.append(escape(self.user or ""))
            if isinstance(self.auth, Password):
                url.append(":")
                url.append(escape(self.auth.password))
            url.append("@")
        if self.host is not None:
            url.append(self.host)
        if self.port is not None:
            url.append(":%d" % self.port)
        if self.database is not None:
            url.append("/")
            url.append(escape(self.database))
        if self.options:
            url.append("?")
            url.append(_format_options(self.options))
        return "".join(url)


class PostgreSQL(ServerURL):

    __slots__ = ServerURL._fields

    protocol = "postgresql"


class MySQL(ServerURL):

    __slots__ = ServerURL._fields

    protocol = "mysql"


class Other(ServerURL):
    """A server URL whose protocol has no dedicated variant.

    The protocol is kept exactly as written in the parsed URL.
    """

    __slots__ = _fields = ("protocol",) + ServerURL._fields


class PartialServerURL(ServerURL):

    __slots__ = ()

    _defaults = {"host": lambda: None, "port": lambda: None,
                 "user": lambda: None, "auth": lambda: NoAuth,
                 "database": lambda: None, "options": dict}


class PartialPostgreSQL(PartialServerURL):

    __slots__ = ServerURL._fields

    protocol = "postgresql"


class PartialMySQL(PartialServerURL):

    __slots__ = ServerURL._fields

    protocol = "mysql"


class PartialOther(PartialServerURL):

    __slots__ = _fields = ("protocol",) + ServerURL._fields


class SQLite(Value):
    """A SQLite database file.

    An empty path stands for a temporary database and C{:memory:} for an
    in-memory one. Paths are never checked against the filesystem.
    """

    __slots__ = _fields = ("path", "options")
    _defaults = {"path": str, "options": dict}

    protocol = "sqlite"

    def __str__(self):
        if self.path.startswith("/"):
            url = "sqlite://" + escape(self.path, safe="/:")
        else:
            url = "sqlite:" + escape(self.path, safe="/:")
        if self.options:
            url += "?" + _format_options(self.options)
        return url
