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


class DBURLError(Exception):
    pass


class DecodeError(DBURLError):
    pass


class ParseError(DBURLError):
    pass

class InvalidURIError(ParseError):
    pass

class InvalidHostError(ParseError):

    def __init__(self, host):
        super(InvalidHostError, self).__init__("Invalid host")
        self.host = host

class InvalidPortError(ParseError):

    def __init__(self, port):
        super(InvalidPortError, self).__init__("Invalid port")
        self.port = port

class RelativeURLError(ParseError):
    pass

class MissingProtocolError(ParseError):
    pass


class MissingFieldError(ParseError):
    pass

class MissingDatabaseError(MissingFieldError):
    pass

class MissingPortError(MissingFieldError):
    pass

class MissingUserError(MissingFieldError):
    pass
