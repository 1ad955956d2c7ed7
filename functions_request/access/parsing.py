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

from functions_request.types import ADDRESS_LEN, Address


def parse_address(text: str) -> Address:
    """ Parse an hex address, with or without the 0x prefix.

    >>> parse_address('0x00000000000000000000000000000000000000ff').hex()
    '00000000000000000000000000000000000000ff'
    >>> parse_address('00000000000000000000000000000000000000FF').hex()
    '00000000000000000000000000000000000000ff'
    """
    value = text.strip()
    if value[:2].lower() == '0x':
        value = value[2:]
    try:
        data = bytes.fromhex(value)
    except ValueError as e:
        raise ValueError(f'invalid address: {text!r}') from e
    if len(data) != ADDRESS_LEN:
        raise ValueError(f'invalid address length: {text!r} has {len(data)} bytes, expected {ADDRESS_LEN}')
    return Address(data)


def _parse_lines(text: str, *, header: Optional[str] = None) -> list[str]:
    lines = text.splitlines()
    if header is not None:
        if not lines or lines[0].strip() != header:
            raise ValueError(f'invalid header, expected {header!r}')
        lines = lines[1:]
    result = []
    for line in lines:
        line = line.split('#', 1)[0].strip()
        if line:
            result.append(line)
    return result


def parse_senders(text: str, *, header: Optional[str] = None) -> list[Address]:
    """ Parses a senders file: one address per line, blank lines and anything after a # are ignored.

    The result keeps the order of the file, repeated addresses only count once.

    Example:

    >>> senders = parse_senders('''functions-senders
    ... # node operator
    ... 0x1111111111111111111111111111111111111111
    ...
    ... 2222222222222222222222222222222222222222  # backup
    ... 0x1111111111111111111111111111111111111111
    ... ''', header='functions-senders')
    >>> [sender.hex()[:4] for sender in senders]
    ['1111', '2222']
    """
    addresses = [parse_address(line) for line in _parse_lines(text, header=header)]
    return list(dict.fromkeys(addresses))
