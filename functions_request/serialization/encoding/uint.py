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

"""
This module implements encoding of unsigned integers of any size.

Values that fit in 64 bits are a plain major type 0 item, bigger values are written as a positive bignum: tag 2
followed by a byte string with the big-endian magnitude, without leading zeros.

>>> from functions_request.serialization import Serializer
>>> se = Serializer.build_bytes_serializer()
>>> encode_uint(se, 0)  # writes 00
>>> encode_uint(se, 1)  # writes 01
>>> encode_uint(se, 500)  # writes 1901f4
>>> se.finalize().hex()
'00011901f4'

>>> se = Serializer.build_bytes_serializer()
>>> encode_uint(se, 2**64 - 1)  # writes 1bffffffffffffffff
>>> encode_uint(se, 2**64)  # writes c249010000000000000000
>>> se.finalize().hex()
'1bffffffffffffffffc249010000000000000000'
"""

from functions_request.serialization import Serializer

from .bytes import encode_bytes
from .head import MAX_UINT64, MajorType, encode_head

# tag number for "unsigned bignum"
TAG_POSITIVE_BIGNUM = 2


def encode_uint(serializer: Serializer, number: int) -> None:
    """ Encode a non-negative int using the shortest form.

    This modules's docstring has more details and examples.
    """
    if number < 0:
        raise ValueError('number must not be negative')
    if number <= MAX_UINT64:
        encode_head(serializer, MajorType.UNSIGNED_INT, number)
        return
    encode_head(serializer, MajorType.TAG, TAG_POSITIVE_BIGNUM)
    encode_bytes(serializer, number.to_bytes((number.bit_length() + 7) // 8, byteorder='big'))
