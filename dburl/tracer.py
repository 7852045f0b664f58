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
from datetime import datetime
import os
import re
import sys


_password_re = re.compile(r"^([^/?#]*//[^@:]*:).*@")


def redact(url):
    """Replace the password of C{url}, if any, with C{***}.

    Everything up to the last C{@} is masked, so a password holding an
    unescaped C{/}, C{?} or C{#} does not leak. SQLite URLs carry no
    credentials and are returned unchanged.
    """
    if url[:7].lower() == "sqlite:":
        return url
    return _password_re.sub(r"\1***@", url)


class DebugTracer(object):

    def __init__(self, stream=None):
        if stream is None:
            stream = sys.stderr
        self._stream = stream

    def url_parse_success(self, url, result, partial):
        time = datetime.now().isoformat()[11:]
        mode = "PARTIAL" if partial else "STRICT"
        self._stream.write(
            "[%s] PARSE %s: %r -> %r\n" % (time, mode, redact(url), result))
        self._stream.flush()

    def url_parse_error(self, url, error, partial):
        time = datetime.now().isoformat()[11:]
        mode = "PARTIAL" if partial else "STRICT"
        self._stream.write("[%s] ERROR %s: %r: %s: %s\n" % (
            time, mode, redact(url), type(error).__name__, error))
        self._stream.flush()


_tracers = []


def trace(name, *args, **kwargs):
    for tracer in _tracers:
        attr = getattr(tracer, name, None)
        if attr:
            attr(*args, **kwargs)


def install_tracer(tracer):
    _tracers.append(tracer)


def get_tracers():
    return _tracers[:]


def remove_all_tracers():
    del _tracers[:]


def remove_tracer(tracer):
    try:
        _tracers.remove(tracer)
    except ValueError:
        pass  # The tracer is not installed, succeed gracefully


def remove_tracer_type(tracer_type):
    _tracers[:] = [
        tracer for tracer in _tracers
        if type(tracer) is not tracer_type
    ]


def debug(flag, stream=None):
    remove_tracer_type(DebugTracer)
    if flag:
        install_tracer(DebugTracer(stream=stream))


def debug_from_environ(environ=None, stream=None):
    """Turn debug tracing on or off according to C{DBURL_DEBUG}.

    Any value other than an empty string or C{0} enables it.

    @return: whether debug tracing is now enabled.
    """
    if environ is None:
        environ = os.environ
    flag = environ.get("DBURL_DEBUG", "0") not in ("", "0")
    debug(flag, stream)
    return flag
