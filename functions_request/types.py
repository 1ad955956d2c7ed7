# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from enum import Enum, IntEnum, unique
from typing import NewType

# XXX: the values of these enums are written as-is in the encoded request, changing them breaks the receivers


@unique
class Location(IntEnum):
    """Where the source code or the secrets of a request live."""
    INLINE = 0
    REMOTE = 1

    def __str__(self) -> str:
        return self.name.lower()


@unique
class CodeLanguage(IntEnum):
    """Language of the request source code."""
    JAVASCRIPT = 0

    def __str__(self) -> str:
        return self.name.lower()


@unique
class MapFraming(Enum):
    """How the key/value stream of an encoded request is framed."""
    # 0xbf ... 0xff around the fields, any CBOR decoder reads a map
    INDEFINITE = 'indefinite'
    # bare key/value stream, for receivers that add the map framing themselves
    NONE = 'none'


# 20-byte account address
Address = NewType('Address', bytes)

ADDRESS_LEN = 20
