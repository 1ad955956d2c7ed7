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

from pydantic import PositiveInt, field_validator

from functions_request.serialization.consts import DEFAULT_BUFFER_CAPACITY
from functions_request.types import MapFraming
from functions_request.utils.pydantic import BaseModel


class FunctionsSettings(BaseModel):
    # Name of the environment these settings were made for: "default", "unittests", ...
    ENVIRONMENT_NAME: str = 'default'

    # Initial capacity of the buffer allocated for each encoded request, it doubles whenever a write doesn't fit
    BUFFER_INITIAL_CAPACITY: PositiveInt = DEFAULT_BUFFER_CAPACITY

    # Maximum size of an encoded request, `None` disables the limit
    MAX_REQUEST_BYTES: Optional[PositiveInt] = None

    # Framing around the encoded request fields, see `MapFraming`
    REQUEST_MAP_FRAMING: MapFraming = MapFraming.INDEFINITE

    # When set, senders files must start with this line
    SENDERS_FILE_HEADER: Optional[str] = None

    @field_validator('SENDERS_FILE_HEADER', mode='after')
    @classmethod
    def _strip_header(cls, header: Optional[str]) -> Optional[str]:
        if header is None:
            return None
        header = header.strip()
        if not header:
            raise ValueError('SENDERS_FILE_HEADER cannot be blank, use null to disable it')
        return header
