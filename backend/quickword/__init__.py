from flask import Flask
from quickword.services.games.rounds import parse_round_schedule
from quickword.services.words import DEFAULT_CATALOG, RoundWordEngine, WordCatalog

def create_app(config_class=None):
    if config_class is None:
        # backend/config.py, importable when run from the backend root
        from config import Config
        config_class = Config
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    # Load the catalog once; it is never mutated after this point
    catalog_path = flask_app.config.get('WORD_CATALOG_PATH')
    if catalog_path:
        catalog = WordCatalog.from_file(catalog_path)
        source = catalog_path
    else:
        catalog = DEFAULT_CATALOG
        source = 'builtin'
    flask_app.logger.info(f"[catalog] loaded size={catalog.size()} source={source}")
    if catalog.size() == 0:
        flask_app.logger.warning(f"[catalog] {source} has no words; round lookups will fail")

    schedule = parse_round_schedule(flask_app.config.get('ROUND_SCHEDULE'))

    flask_app.extensions['quickword'] = {
        'engine': RoundWordEngine(catalog),
        'schedule': schedule,
        'answer_window_ms': int(flask_app.config.get('ANSWER_WINDOW_SEC', 120)) * 1000,
    }

    # Register CLI commands
    from quickword.cli import register_cli_commands
    register_cli_commands(flask_app)

    return flask_app
