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
from pathlib import Path
from typing import NamedTuple, Optional

from structlog import get_logger

from functions_request.conf.settings import FunctionsSettings as Settings

logger = get_logger()

CONFIG_YAML_ENV_VAR = 'FUNCTIONS_CONFIG_YAML'


class _SettingsMetadata(NamedTuple):
    source: str
    settings: Settings


_settings_singleton: Optional[_SettingsMetadata] = None


def get_global_settings() -> Settings:
    return FunctionsSettings()


def FunctionsSettings() -> Settings:
    """
    Returns the loaded settings.

    The settings are read from the yaml filepath in the 'FUNCTIONS_CONFIG_YAML' env var, if it isn't set the packaged
    default configuration is used. The file is only read once, later calls return the same instance.
    """
    from functions_request.conf import DEFAULT_SETTINGS_FILEPATH
    settings_yaml_filepath = os.environ.get(CONFIG_YAML_ENV_VAR, DEFAULT_SETTINGS_FILEPATH)
    return _load_settings_singleton(settings_yaml_filepath)


def get_settings_source() -> str:
    """ Returns the path of the YAML file that was loaded.

    XXX: Will raise an assertion error if FunctionsSettings() wasn't used before.
    """
    global _settings_singleton
    assert _settings_singleton is not None, 'FunctionsSettings() not called before'
    return _settings_singleton.source


def load_yaml_settings(filepath: str) -> Settings:
    """
    Load the settings from a yaml file and return a validated instance.
    YAML settings may use the `extends` key to merge definition with another existing file, relative paths that don't
    exist next to the file are looked up among the packaged configurations.
    """
    from functions_request.utils.yaml import model_from_extended_yaml
    return model_from_extended_yaml(Settings, filepath=filepath, custom_root=Path(__file__).parent)


def _load_settings_singleton(source: str) -> Settings:
    global _settings_singleton

    if _settings_singleton is not None:
        if _settings_singleton.source != source:
            raise Exception('loading config twice with a different file')

        return _settings_singleton.settings

    settings = load_yaml_settings(source)
    logger.new().debug('settings loaded', source=source, environment=settings.ENVIRONMENT_NAME)
    _settings_singleton = _SettingsMetadata(source=source, settings=settings)

    return _settings_singleton.settings
