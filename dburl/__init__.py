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
from dburl.exceptions import (
    DBURLError, InvalidHostError, InvalidPortError, InvalidURIError,
    MissingDatabaseError, MissingFieldError, MissingPortError,
    MissingProtocolError, MissingUserError, ParseError, RelativeURLError)
from dburl.parser import parse, parse_partial
from dburl.tracer import debug, debug_from_environ
from dburl.url import (
    MySQL, NoAuth, Other, PartialMySQL, PartialOther, PartialPostgreSQL,
    Password, PostgreSQL, SQLite)


version = "0.1.0"
version_info = tuple([int(x) for x in version.split(".")])


# Debug tracing is off unless the DBURL_DEBUG environment variable is set to
# something other than '0'.
debug_from_environ()
