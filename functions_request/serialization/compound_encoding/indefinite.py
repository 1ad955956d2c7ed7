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
Indefinite-length arrays and maps: the size is never declared, an open marker is written, then the items, then a
break.

Layout: [0x9f][value_0]...[value_N][0xff]

>>> from functions_request.serialization.encoding.utf8 import encode_utf8
>>> se = Serializer.build_bytes_serializer()
>>> value = ['foobar', 'π', 'test']
>>> encode_indefinite_array(se, value, encode_utf8)
>>> se.finalize().hex()
'9f66666f6f62617262cf806474657374ff'

Breakdown of the result:

    9f: start of an array of unknown length
    66666f6f626172: 'foobar' (with length prefix)
    62cf80: 'π' (with length prefix)
    6474657374: 'test' (with length prefix)
    ff: break

Because the length is not needed upfront, any iterable works, including generators:

>>> se = Serializer.build_bytes_serializer()
>>> encode_indefinite_array(se, (str(i) for i in range(2)), encode_utf8)
>>> se.finalize().hex()
'9f61306131ff'

Maps are opened with `start_indefinite_map` and closed with `encode_break`, the caller writes the keys and values in
between, in whatever order the receiver expects.
"""

from collections.abc import Iterable
from typing import TypeVar

from functions_request.serialization import Serializer
from functions_request.serialization.encoding.head import MajorType, encode_break, encode_indefinite_head

from . import Encoder

T = TypeVar('T')


def start_indefinite_array(serializer: Serializer) -> None:
    encode_indefinite_head(serializer, MajorType.ARRAY)


def start_indefinite_map(serializer: Serializer) -> None:
    encode_indefinite_head(serializer, MajorType.MAP)


def encode_indefinite_array(serializer: Serializer, values: Iterable[T], encoder: Encoder[T]) -> None:
    start_indefinite_array(serializer)
    for value in values:
        encoder(serializer, value)
    encode_break(serializer)
