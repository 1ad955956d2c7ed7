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
import re

from structlog import get_logger

BASE_VERSION = '0.1.0'

# Release builds export the full version (for example 0.1.0 or 0.2.0-rc.1), local builds get a -local suffix.
BUILD_VERSION_ENV_VAR = 'FUNCTIONS_BUILD_VERSION'
BUILD_VERSION_REGEX = re.compile(r'^\d+\.\d+\.\d+(-rc\.\d+)?$')

logger = get_logger()


def get_version() -> str:
    build_version = os.environ.get(BUILD_VERSION_ENV_VAR, '').strip()
    if not build_version:
        return BASE_VERSION + '-local'
    if not BUILD_VERSION_REGEX.match(build_version):
        logger.warning('ignoring build version with an invalid format', build_version=build_version)
        return BASE_VERSION + '-local'
    return build_version


__version__ = get_version()
