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

from argparse import ArgumentParser, Namespace


def create_parser() -> ArgumentParser:
    from functions_request_cli.util import create_parser
    parser = create_parser()
    parser.add_argument('senders_file', help='File with one authorized sender address per line')
    parser.add_argument('--address', help='Exit with 1 unless this address is in the file')
    return parser


def execute(args: Namespace) -> int:
    from functions_request.access import AuthorizedSenders, parse_address, parse_senders
    from functions_request.conf.get_settings import get_global_settings

    settings = get_global_settings()
    with open(args.senders_file, 'r', encoding='utf-8') as fp:
        content = fp.read()

    try:
        senders = parse_senders(content, header=settings.SENDERS_FILE_HEADER)
    except ValueError as e:
        print('Error: {}'.format(e))
        return 1

    authorized = AuthorizedSenders(lambda _caller: True)
    if senders:
        authorized.set_authorized_senders(senders, caller=senders[0])

    for sender in authorized.get_authorized_senders():
        print('0x' + sender.hex())

    if args.address is None:
        return 0

    try:
        address = parse_address(args.address)
    except ValueError as e:
        print('Error: {}'.format(e))
        return 1

    if authorized.is_authorized_sender(address):
        print('authorized: 0x{}'.format(address.hex()))
        return 0
    print('not authorized: 0x{}'.format(address.hex()))
    return 1


def main() -> int:
    parser = create_parser()
    args = parser.parse_args()
    return execute(args)
