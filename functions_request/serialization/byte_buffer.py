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
A growable byte buffer with a fixed starting capacity.

The backing storage is allocated upfront and only grows by doubling, it never shrinks. Writes that don't fit in the
remaining capacity double it (as many times as needed) before copying the data in.

>>> buf = ByteBuffer(capacity=4)
>>> buf.append(b'abc')
>>> buf.capacity, len(buf)
(4, 3)
>>> buf.append(b'defgh')
>>> buf.capacity, len(buf)
(8, 8)
>>> buf.append_byte(0x21)
>>> buf.capacity
16
>>> buf.to_bytes()
b'abcdefgh!'
"""

from .consts import DEFAULT_BUFFER_CAPACITY
from .types import Buffer


class ByteBuffer:
    __slots__ = ('_data', '_length')

    def __init__(self, capacity: int = DEFAULT_BUFFER_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError(f'capacity must be positive, got {capacity}')
        self._data = bytearray(capacity)
        self._length = 0

    def __len__(self) -> int:
        return self._length

    @property
    def capacity(self) -> int:
        return len(self._data)

    def _reserve(self, extra: int) -> None:
        required = self._length + extra
        capacity = len(self._data)
        if required <= capacity:
            return
        while capacity < required:
            capacity *= 2
        new_data = bytearray(capacity)
        new_data[:self._length] = self._data[:self._length]
        self._data = new_data

    def append(self, data: Buffer) -> None:
        """Append a byte sequence, growing the buffer if needed."""
        view = memoryview(data).cast('B')
        size = len(view)
        self._reserve(size)
        self._data[self._length:self._length + size] = view
        self._length += size

    def append_byte(self, value: int) -> None:
        """Append a single byte, `value` must be in the range 0..255."""
        if not 0 <= value <= 0xff:
            raise ValueError(f'byte out of range: {value}')
        self._reserve(1)
        self._data[self._length] = value
        self._length += 1

    def to_bytes(self) -> bytes:
        """Copy of the written portion, later appends do not affect it."""
        return bytes(self._data[:self._length])
