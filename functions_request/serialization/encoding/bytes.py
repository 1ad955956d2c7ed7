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

r"""
This modules implements encoding of byte sequences (major type 2) by prefixing them with their length in the head.

>>> from functions_request.serialization import Serializer
>>> se = Serializer.build_bytes_serializer()
>>> encode_bytes(se, b'test')  # will prepend b'\x44' before writing b'test'
>>> se.finalize().hex()
'4474657374'

>>> se = Serializer.build_bytes_serializer()
>>> raw_data = b'test' * 32
>>> len(raw_data)
128
>>> encode_bytes(se, raw_data)  # prepends b'\x58\x80' before raw_data
>>> encoded_data = se.finalize()
>>> len(encoded_data)
130
>>> encoded_data[:6].hex()
'588074657374'
"""

from functions_request.serialization import Serializer

from .head import MajorType, encode_head


def encode_bytes(serializer: Serializer, data: bytes) -> None:
    """ Encodes a byte-sequence adding a length prefix.

    This modules's docstring has more details and examples.
    """
    assert isinstance(data, (bytes, bytearray))
    encode_head(serializer, MajorType.BYTE_STRING, len(data))
    serializer.write_bytes(data)
