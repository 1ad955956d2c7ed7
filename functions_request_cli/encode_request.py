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

import base64
from argparse import ArgumentParser, Namespace
from typing import Optional


def create_parser() -> ArgumentParser:
    from functions_request_cli.util import create_parser
    parser = create_parser()
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument('--source', help='Source code, or the URL of the source code when used with --remote')
    source.add_argument('--source-file', help='Read the source code from this file')
    parser.add_argument('--remote', action='store_true', help='The source is an URL to the code')
    parser.add_argument('--arg', dest='args', action='append', default=[],
                        help='Positional argument of the job, can be repeated')
    secrets = parser.add_mutually_exclusive_group()
    secrets.add_argument('--secrets-hex', help='Remote secrets reference, in hex')
    secrets.add_argument('--secrets-file', help='Read the remote secrets reference from this (binary) file')
    parser.add_argument('--base64', action='store_true', help='Print the encoded request in base64 instead of hex')
    return parser


def _read_source(args: Namespace) -> str:
    if args.source_file:
        with open(args.source_file, 'r', encoding='utf-8') as fp:
            return fp.read()
    return args.source


def _read_secrets(args: Namespace) -> Optional[bytes]:
    if args.secrets_file:
        with open(args.secrets_file, 'rb') as fp:
            return fp.read()
    if args.secrets_hex is not None:
        return bytes.fromhex(args.secrets_hex.removeprefix('0x'))
    return None


def execute(args: Namespace) -> int:
    from functions_request import CodeLanguage, FunctionsError, Location, RequestBuilder

    location = Location.REMOTE if args.remote else Location.INLINE
    try:
        secrets = _read_secrets(args)
    except ValueError:
        print('Error: --secrets-hex must be an hex string')
        return 1

    builder = RequestBuilder()
    try:
        builder.initialize_request(location, CodeLanguage.JAVASCRIPT, _read_source(args))
        if args.args:
            builder.add_args(args.args)
        if secrets is not None:
            builder.add_remote_secrets(secrets)
        encoded = builder.encode()
    except FunctionsError as e:
        print('Error: {} ({})'.format(e, type(e).__name__))
        return 1

    if args.base64:
        print(base64.b64encode(encoded).decode('ascii'))
    else:
        print(encoded.hex())
    return 0


def main() -> int:
    parser = create_parser()
    args = parser.parse_args()
    return execute(args)
