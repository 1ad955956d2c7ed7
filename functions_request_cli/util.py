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

import logging
import sys
from argparse import ArgumentParser
from enum import Enum
from typing import Any, NamedTuple

import configargparse
import structlog
from typing_extensions import assert_never

ENV_VAR_PREFIX = 'functions_'


def create_parser(*, add_help: bool = True) -> ArgumentParser:
    """Parser whose long options can also be set through FUNCTIONS_* environment variables."""
    return configargparse.ArgumentParser(auto_env_var_prefix=ENV_VAR_PREFIX, add_help=add_help)


def _colored_level_styles() -> dict[str, str]:
    import colorama
    return {
        'critical': colorama.Style.BRIGHT + colorama.Fore.RED,
        'exception': colorama.Fore.RED,
        'error': colorama.Fore.RED,
        'warn': colorama.Fore.YELLOW,
        'warning': colorama.Fore.YELLOW,
        'info': colorama.Fore.GREEN,
        'debug': colorama.Style.BRIGHT + colorama.Fore.CYAN,
        'notset': colorama.Back.RED,
    }


class LoggingOutput(Enum):
    NULL = 'null'
    PRETTY = 'pretty'
    JSON = 'json'


class LoggingArgs(NamedTuple):
    output: LoggingOutput
    debug: bool


def extract_logging_args(argv: list[str]) -> LoggingArgs:
    """Remove the logging options from `argv` in place, they are shared by every subcommand.

    `--json-logs` and `--disable-logs` choose the output, `--debug` lowers the level from info to debug.
    """
    parser = create_parser(add_help=False)
    output = parser.add_mutually_exclusive_group()
    output.add_argument('--json-logs', dest='output', action='store_const', const=LoggingOutput.JSON)
    output.add_argument('--disable-logs', dest='output', action='store_const', const=LoggingOutput.NULL)
    parser.add_argument('--debug', action='store_true')

    args, remaining_argv = parser.parse_known_args(argv)
    argv[:] = remaining_argv
    return LoggingArgs(output=args.output or LoggingOutput.PRETTY, debug=args.debug)


def _build_handler(output: LoggingOutput, pre_chain: list[Any]) -> logging.Handler:
    renderer: Any
    match output:
        case LoggingOutput.NULL:
            return logging.NullHandler()
        case LoggingOutput.PRETTY:
            colors = sys.stderr.isatty()
            level_styles = _colored_level_styles() if colors else None
            renderer = structlog.dev.ConsoleRenderer(colors=colors, level_styles=level_styles)
        case LoggingOutput.JSON:
            renderer = structlog.processors.JSONRenderer()
        case _:
            assert_never(output)

    handler = logging.StreamHandler()
    handler.setFormatter(structlog.stdlib.ProcessorFormatter(processor=renderer, foreign_pre_chain=pre_chain))
    return handler


def setup_logging(logging_args: LoggingArgs) -> None:
    """Route structlog through the stdlib root logger, rendering with colors, as JSON lines or not at all."""
    timestamper = structlog.processors.TimeStamper(fmt='%Y-%m-%d %H:%M:%S')
    # applied to records that come from stdlib loggers
    pre_chain: list[Any] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        timestamper,
    ]

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.addHandler(_build_handler(logging_args.output, pre_chain))
    root.setLevel(logging.DEBUG if logging_args.debug else logging.INFO)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            timestamper,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
