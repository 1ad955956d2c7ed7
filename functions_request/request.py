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
Building and encoding of off-chain computation requests.

A request is created empty, changed through the builder operations below and then encoded once into CBOR. The
builder operations validate their whole input before touching the request, so a failed call never leaves a request
half-updated.

The encoded request is a map with these keys, in this exact order:

    codeLocation     uint
    source           text
    args             indefinite-length array of text     (only when there are args)
    secretsLocation  uint                                (only when there are secrets)
    secrets          bytes                               (only when there are secrets)

The order, the presence rules and the enum values are what the receivers decode, changing any of them is a breaking
change of the wire format.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from structlog import get_logger

from functions_request.exception import EmptyArgs, EmptySecrets, EmptySource, NoInlineSecrets, RequestTooLarge
from functions_request.serialization import Serializer
from functions_request.serialization.adapters import MaxBytesExceededError
from functions_request.serialization.compound_encoding.indefinite import encode_indefinite_array, start_indefinite_map
from functions_request.serialization.encoding.bytes import encode_bytes
from functions_request.serialization.encoding.head import encode_break
from functions_request.serialization.encoding.uint import encode_uint
from functions_request.serialization.encoding.utf8 import encode_utf8
from functions_request.types import CodeLanguage, Location, MapFraming

if TYPE_CHECKING:
    from functions_request.conf.settings import FunctionsSettings

logger = get_logger()

KEY_CODE_LOCATION = 'codeLocation'
KEY_SOURCE = 'source'
KEY_ARGS = 'args'
KEY_SECRETS_LOCATION = 'secretsLocation'
KEY_SECRETS = 'secrets'


@dataclass
class Request:
    """A job description under construction.

    Field presence in the encoded form depends only on `secrets` and `args` being non-empty.
    """
    code_location: Location = Location.INLINE
    secrets_location: Location = Location.INLINE
    language: CodeLanguage = CodeLanguage.JAVASCRIPT
    # the code itself or an URL to it
    source: str = ''
    # opaque encrypted payload or a reference to it, empty means no secrets
    secrets: bytes = b''
    args: list[str] = field(default_factory=list)

    def is_initialized(self) -> bool:
        return bool(self.source)


def initialize_request(request: Request, location: Location, language: CodeLanguage, source: str) -> None:
    """Set where the code lives, its language and the code (or its location) itself.

    Calling it again overwrites these three fields and keeps any secrets or args already attached.
    """
    if not source:
        raise EmptySource('source cannot be empty')
    request.code_location = location
    request.language = language
    request.source = source


def initialize_inline_javascript(request: Request, source: str) -> None:
    initialize_request(request, Location.INLINE, CodeLanguage.JAVASCRIPT, source)


def add_remote_secrets(request: Request, secrets: bytes) -> None:
    """Attach a reference to remotely hosted encrypted secrets.

    Secrets can only be attached as remote, there is no way to attach them inline.
    """
    if not secrets:
        raise EmptySecrets('secrets cannot be empty')
    request.secrets_location = Location.REMOTE
    request.secrets = bytes(secrets)


def add_args(request: Request, args: Iterable[str]) -> None:
    """Set the positional arguments of the job, keeping the given order."""
    if isinstance(args, str):
        raise TypeError('args must be a sequence of str, not a str')
    args_list = list(args)
    if not args_list:
        raise EmptyArgs('args cannot be empty')
    for arg in args_list:
        if not isinstance(arg, str):
            raise TypeError(f'args must be str, got {type(arg).__name__}')
    request.args = args_list


def _write_request_fields(serializer: Serializer, request: Request) -> None:
    encode_utf8(serializer, KEY_CODE_LOCATION)
    encode_uint(serializer, request.code_location.value)

    encode_utf8(serializer, KEY_SOURCE)
    encode_utf8(serializer, request.source)

    if request.args:
        encode_utf8(serializer, KEY_ARGS)
        encode_indefinite_array(serializer, request.args, encode_utf8)

    if request.secrets:
        encode_utf8(serializer, KEY_SECRETS_LOCATION)
        encode_uint(serializer, request.secrets_location.value)

        encode_utf8(serializer, KEY_SECRETS)
        encode_bytes(serializer, request.secrets)


def encode_request(request: Request, *, settings: Optional['FunctionsSettings'] = None) -> bytes:
    """Encode the request into CBOR, the request itself is not changed.

    Encoding the same request twice yields the same bytes. When `settings` is not given the global settings are used.
    """
    if settings is None:
        from functions_request.conf.get_settings import get_global_settings
        settings = get_global_settings()

    if not request.source:
        raise EmptySource('cannot encode a request without source')
    if request.secrets and request.secrets_location == Location.INLINE:
        raise NoInlineSecrets('inline secrets are not supported')

    serializer = Serializer.build_bytes_serializer(settings.BUFFER_INITIAL_CAPACITY)
    se = serializer.with_optional_max_bytes(settings.MAX_REQUEST_BYTES)
    try:
        if settings.REQUEST_MAP_FRAMING is MapFraming.INDEFINITE:
            start_indefinite_map(se)
            _write_request_fields(se, request)
            encode_break(se)
        else:
            _write_request_fields(se, request)
    except MaxBytesExceededError as e:
        raise RequestTooLarge(f'encoded request exceeds {settings.MAX_REQUEST_BYTES} bytes') from e
    encoded = se.finalize()

    logger.debug('request encoded', size=len(encoded), has_args=bool(request.args),
                 has_secrets=bool(request.secrets))
    return encoded


class RequestBuilder:
    """RequestBuilder holds a single request and exposes the builder operations as chained calls.

    Example:

        encoded = (
            RequestBuilder()
            .initialize_inline_javascript('return Functions.encodeUint256(1)')
            .add_args(['ETH', 'USD'])
            .encode()
        )
    """
    def __init__(self, request: Optional[Request] = None, *, settings: Optional['FunctionsSettings'] = None) -> None:
        self.request: Request = request if request is not None else Request()
        self._settings = settings

    def initialize_request(self, location: Location, language: CodeLanguage, source: str) -> 'RequestBuilder':
        initialize_request(self.request, location, language, source)
        return self

    def initialize_inline_javascript(self, source: str) -> 'RequestBuilder':
        initialize_inline_javascript(self.request, source)
        return self

    def add_remote_secrets(self, secrets: bytes) -> 'RequestBuilder':
        add_remote_secrets(self.request, secrets)
        return self

    def add_args(self, args: Iterable[str]) -> 'RequestBuilder':
        add_args(self.request, args)
        return self

    def encode(self) -> bytes:
        return encode_request(self.request, settings=self._settings)
