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
This module exports the types and functions needed to build and encode requests.
"""

from functions_request.exception import (
    EmptyArgs,
    EmptySecrets,
    EmptySendersList,
    EmptySource,
    FunctionsError,
    NoInlineSecrets,
    NotAllowedToSetSenders,
    RequestTooLarge,
    UnauthorizedSender,
)
from functions_request.request import (
    Request,
    RequestBuilder,
    add_args,
    add_remote_secrets,
    encode_request,
    initialize_inline_javascript,
    initialize_request,
)
from functions_request.types import Address, CodeLanguage, Location, MapFraming
from functions_request.version import __version__

__all__ = [
    'Address',
    'CodeLanguage',
    'Location',
    'MapFraming',
    'Request',
    'RequestBuilder',
    'add_args',
    'add_remote_secrets',
    'encode_request',
    'initialize_inline_javascript',
    'initialize_request',
    'EmptyArgs',
    'EmptySecrets',
    'EmptySendersList',
    'EmptySource',
    'FunctionsError',
    'NoInlineSecrets',
    'NotAllowedToSetSenders',
    'RequestTooLarge',
    'UnauthorizedSender',
    '__version__',
]
