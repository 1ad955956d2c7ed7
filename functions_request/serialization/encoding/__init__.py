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
This module was made to hold simple CBOR (RFC 8949) encoding implementations.

Simple in this context means "not compound". Every CBOR data item starts with a head: the major type in the 3 high
bits of the first byte and the "additional information" in the 5 low bits, optionally followed by an argument. The
`head` submodule takes care of that, the other submodules deal with a single type each.

The general organization should be that each submodule `x` deals with a single type and look like this:

    def encode_x(serializer: Serializer, value: ValueType, ...config params...) -> None:
        ...

There are no decoders, requests are only ever written by this package. For compound types (arrays, maps) the encoder
should be in the `compound_encoding` module.
"""
