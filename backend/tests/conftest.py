import os
import sys
import pytest

# Ensure the backend root (containing the `quickword` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from quickword import create_app


class TestConfig:
    TESTING = True
    WORD_CATALOG_PATH = None
    ROUND_SCHEDULE = '60:0,30:5'
    ANSWER_WINDOW_SEC = 120
    DEFAULT_INTERVAL_MIN = 30


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application


@pytest.fixture()
def runner(flask_app):
    return flask_app.test_cli_runner()


@pytest.fixture()
def small_catalog():
    from quickword.services.words import WordCatalog
    return WordCatalog(['bird', 'house', 'money'])
