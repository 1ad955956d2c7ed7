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

import os
import sys
from types import ModuleType
from typing import NamedTuple

from structlog import get_logger

logger = get_logger()


class Command(NamedTuple):
    group: str
    name: str
    module: ModuleType
    description: str


class CliManager:
    """Dispatches `functions-request <command> [options]` to the `main()` of the command's module."""

    def __init__(self) -> None:
        self.basename: str = os.path.basename(sys.argv[0])
        self.commands: dict[str, Command] = {}

        from . import check_senders, encode_request

        self.add_cmd('requests', 'encode_request', encode_request, 'Build a request and print its CBOR encoding')
        self.add_cmd('access', 'check_senders', check_senders,
                     'Read a senders file and check whether an address is authorized')

    def add_cmd(self, group: str, name: str, module: ModuleType, description: str = '') -> None:
        if name in self.commands:
            raise ValueError(f'command {name} registered twice')
        self.commands[name] = Command(group, name, module, description)

    def help(self) -> None:
        from colorama import Fore, Style

        width = max((len(name) for name in self.commands), default=0)
        print()
        print('Usage: {} <command> [options]'.format(self.basename))
        print()
        for group in sorted({command.group for command in self.commands.values()}):
            print(Fore.RED + Style.BRIGHT + '[{}]'.format(group) + Style.RESET_ALL)
            for command in self.commands.values():
                if command.group == group:
                    print('    {}   {}'.format(command.name.ljust(width), command.description))
            print()

    def execute_from_command_line(self) -> int:
        from functions_request_cli.util import extract_logging_args, setup_logging

        if len(sys.argv) < 2 or sys.argv[1] in ('help', '-h', '--help'):
            self.help()
            return 0

        name = sys.argv.pop(1)
        command = self.commands.get(name)
        if command is None:
            print('Unknown command: "{}"'.format(name))
            print('Type "{} help" for usage.'.format(self.basename))
            return -1

        # the command's parser reports errors as "functions-request <command>: ..."
        sys.argv[0] = '{} {}'.format(sys.argv[0], name)
        setup_logging(extract_logging_args(sys.argv))
        return command.module.main()


def main() -> None:
    try:
        sys.exit(CliManager().execute_from_command_line())
    except KeyboardInterrupt:
        logger.warning('aborting')
        sys.exit(1)
    except Exception:
        logger.exception('uncaught exception')
        sys.exit(2)


if __name__ == '__main__':
    main()
