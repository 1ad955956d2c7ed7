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
Write side of the encoders.

Every encoder in `functions_request.serialization.encoding` takes a `Serializer` as its first argument and only ever
calls `write_byte` and `write_bytes` on it, so the same encoders work on a plain in-memory serializer or on an adapter
that limits or inspects what is written.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, overload

from typing_extensions import Self

from .consts import DEFAULT_BUFFER_CAPACITY
from .types import Buffer

if TYPE_CHECKING:
    from .adapters import MaxBytesSerializer
    from .bytes_serializer import BytesSerializer


class Serializer(ABC):
    def finalize(self) -> bytes:
        """Return everything written so far as `bytes`, nothing can be written afterwards."""
        raise TypeError('this serializer does not support finalization')

    @abstractmethod
    def cur_pos(self) -> int:
        """Number of bytes written so far."""
        raise NotImplementedError

    @abstractmethod
    def write_byte(self, data: int) -> None:
        raise NotImplementedError

    @abstractmethod
    def write_bytes(self, data: Buffer) -> None:
        # XXX: byte by byte fallback, implementations that own a buffer should copy the whole sequence at once
        for byte in bytes(memoryview(data)):
            self.write_byte(byte)

    def with_max_bytes(self, max_bytes: int) -> MaxBytesSerializer[Self]:
        """Wrap this serializer so that writing past `max_bytes` raises `MaxBytesExceededError`."""
        from .adapters import MaxBytesSerializer
        return MaxBytesSerializer(self, max_bytes)

    @overload
    def with_optional_max_bytes(self, max_bytes: None) -> Self:
        ...

    @overload
    def with_optional_max_bytes(self, max_bytes: int) -> MaxBytesSerializer[Self]:
        ...

    def with_optional_max_bytes(self, max_bytes: int | None) -> Self | MaxBytesSerializer[Self]:
        """Same as `with_max_bytes`, except that `None` means no limit and returns this same serializer."""
        if max_bytes is None:
            return self
        return self.with_max_bytes(max_bytes)

    @staticmethod
    def build_bytes_serializer(initial_capacity: int = DEFAULT_BUFFER_CAPACITY) -> BytesSerializer:
        """In-memory serializer backed by a fresh `ByteBuffer` of `initial_capacity` bytes."""
        from .bytes_serializer import BytesSerializer
        return BytesSerializer(initial_capacity)
