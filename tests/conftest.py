import os

from jamcodec.conf import UNITTESTS_SETTINGS_FILEPATH

os.environ['JAMCODEC_CONFIG_YAML'] = os.environ.get('JAMCODEC_TEST_CONFIG_YAML', UNITTESTS_SETTINGS_FILEPATH)
