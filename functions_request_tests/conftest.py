import os

from functions_request.conf import UNITTESTS_SETTINGS_FILEPATH

os.environ['FUNCTIONS_CONFIG_YAML'] = os.environ.get('FUNCTIONS_TEST_CONFIG_YAML', UNITTESTS_SETTINGS_FILEPATH)
