#  Copyright 2025 Hathor Labs
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#  http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.

r"""
This module implements text string encoding (major type 3).

It works exactly like bytes-encoding but the major type is different and it takes a `str`, the length in the head is
the length of the utf-8 encoded data, not the number of characters.

>>> from functions_request.serialization import Serializer
>>> se = Serializer.build_bytes_serializer()
>>> encode_utf8(se, 'foobar')  # writes 66666f6f626172
>>> encode_utf8(se, 'π')  # writes 62cf80
>>> encode_utf8(se, '')  # writes 60
>>> se.finalize().hex()
'66666f6f62617262cf8060'
"""

from functions_request.serialization import Serializer

from .head import MajorType, encode_head


def encode_utf8(serializer: Serializer, value: str) -> None:
    """ Encodes a string using UTF-8 and adding a length prefix.

    This modules's docstring has more details and examples.
    """
    assert isinstance(value, str)
    data = value.encode('utf-8')
    encode_head(serializer, MajorType.TEXT_STRING, len(data))
    serializer.write_bytes(data)
