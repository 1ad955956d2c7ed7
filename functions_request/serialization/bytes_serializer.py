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

from typing import Optional

from typing_extensions import override

from .byte_buffer import ByteBuffer
from .consts import DEFAULT_BUFFER_CAPACITY
from .exceptions import FinalizedSerializerError
from .serializer import Serializer
from .types import Buffer


class BytesSerializer(Serializer):
    """Simple implementation of Serializer to write to memory.

    Every write goes straight into a ByteBuffer owned by this serializer, the buffer is released when finalize is
    called.
    """

    def __init__(self, initial_capacity: int = DEFAULT_BUFFER_CAPACITY) -> None:
        self._buffer: Optional[ByteBuffer] = ByteBuffer(initial_capacity)

    def _get_buffer(self) -> ByteBuffer:
        if self._buffer is None:
            raise FinalizedSerializerError('serializer was already finalized')
        return self._buffer

    @property
    def capacity(self) -> int:
        return self._get_buffer().capacity

    @override
    def finalize(self) -> bytes:
        result = self._get_buffer().to_bytes()
        self._buffer = None
        return result

    @override
    def cur_pos(self) -> int:
        return len(self._get_buffer())

    @override
    def write_byte(self, data: int) -> None:
        self._get_buffer().append_byte(data)

    @override
    def write_bytes(self, data: Buffer) -> None:
        self._get_buffer().append(data)
