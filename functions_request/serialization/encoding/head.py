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
This module implements the head of a CBOR data item, always using the shortest form for the argument.

Layout: [major_type << 5 | additional_info][argument: 0, 1, 2, 4 or 8 bytes big-endian]

    argument < 24            -> inlined in additional_info
    argument <= 0xff         -> additional_info=24, 1 byte follows
    argument <= 0xffff       -> additional_info=25, 2 bytes follow
    argument <= 0xffffffff   -> additional_info=26, 4 bytes follow
    argument <= 2**64 - 1    -> additional_info=27, 8 bytes follow

>>> from functions_request.serialization import Serializer
>>> se = Serializer.build_bytes_serializer()
>>> encode_head(se, MajorType.UNSIGNED_INT, 23)  # writes 17
>>> encode_head(se, MajorType.UNSIGNED_INT, 24)  # writes 1818
>>> encode_head(se, MajorType.TEXT_STRING, 300)  # writes 79012c
>>> encode_head(se, MajorType.BYTE_STRING, 70000)  # writes 5a00011170
>>> se.finalize().hex()
'17181879012c5a00011170'

Indefinite-length items replace the argument with additional_info=31 and are closed by a break (0xff):

>>> se = Serializer.build_bytes_serializer()
>>> encode_indefinite_head(se, MajorType.ARRAY)  # writes 9f
>>> encode_indefinite_head(se, MajorType.MAP)  # writes bf
>>> encode_break(se)  # writes ff
>>> se.finalize().hex()
'9fbfff'
"""

from enum import IntEnum, unique

from functions_request.serialization import Serializer

# additional info values that change the meaning of the head
ADDITIONAL_INFO_UINT8 = 24
ADDITIONAL_INFO_UINT16 = 25
ADDITIONAL_INFO_UINT32 = 26
ADDITIONAL_INFO_UINT64 = 27
ADDITIONAL_INFO_INDEFINITE = 31

MAX_UINT64 = 0xffff_ffff_ffff_ffff

# major type 7 with additional info 31
BREAK = 0xff


@unique
class MajorType(IntEnum):
    UNSIGNED_INT = 0
    NEGATIVE_INT = 1
    BYTE_STRING = 2
    TEXT_STRING = 3
    ARRAY = 4
    MAP = 5
    TAG = 6
    SIMPLE = 7


def _initial_byte(major_type: MajorType, additional_info: int) -> int:
    return (major_type << 5) | additional_info


def encode_head(serializer: Serializer, major_type: MajorType, argument: int) -> None:
    """ Encode the head of a data item, `argument` must fit in 64 bits.

    This modules's docstring has more details and examples.
    """
    if argument < 0:
        raise ValueError('argument must not be negative')
    if argument < ADDITIONAL_INFO_UINT8:
        serializer.write_byte(_initial_byte(major_type, argument))
    elif argument <= 0xff:
        serializer.write_byte(_initial_byte(major_type, ADDITIONAL_INFO_UINT8))
        serializer.write_byte(argument)
    elif argument <= 0xffff:
        serializer.write_byte(_initial_byte(major_type, ADDITIONAL_INFO_UINT16))
        serializer.write_bytes(argument.to_bytes(2, byteorder='big'))
    elif argument <= 0xffff_ffff:
        serializer.write_byte(_initial_byte(major_type, ADDITIONAL_INFO_UINT32))
        serializer.write_bytes(argument.to_bytes(4, byteorder='big'))
    elif argument <= MAX_UINT64:
        serializer.write_byte(_initial_byte(major_type, ADDITIONAL_INFO_UINT64))
        serializer.write_bytes(argument.to_bytes(8, byteorder='big'))
    else:
        raise ValueError('too big to encode')


def encode_indefinite_head(serializer: Serializer, major_type: MajorType) -> None:
    """ Encode the head of an indefinite-length item, the length is not declared and a break closes the item.
    """
    if major_type not in (MajorType.BYTE_STRING, MajorType.TEXT_STRING, MajorType.ARRAY, MajorType.MAP):
        raise ValueError(f'major type {major_type.name} cannot have indefinite length')
    serializer.write_byte(_initial_byte(major_type, ADDITIONAL_INFO_INDEFINITE))


def encode_break(serializer: Serializer) -> None:
    """ Encode the "break" stop code that closes an indefinite-length item."""
    serializer.write_byte(BREAK)
