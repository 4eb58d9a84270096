import json

import click
from flask import current_app
from flask.cli import with_appcontext

from quickword.services.games.rounds import current_round, now_ms
from quickword.services.games.scoring import get_rank, is_correct_guess
from quickword.services.words import InvalidCatalogError, RoundWord
from quickword.services.words.engine import round_key


def _state() -> dict:
    return current_app.extensions['quickword']


def _derive(round_start_ms: int, interval_min: int) -> RoundWord:
    try:
        return _state()['engine'].derive(round_start_ms, interval_min)
    except InvalidCatalogError as exc:
        current_app.logger.error(f"[round-word] {exc}")
        raise click.ClickException(str(exc))


def _interval_or_default(interval_min):
    if interval_min is None:
        interval_min = int(current_app.config.get('DEFAULT_INTERVAL_MIN', 30))
    if interval_min <= 0:
        # The engine would accept it, but no participant can bucket time by it
        raise click.BadParameter('interval must be a positive number of minutes', param_hint='--interval')
    return interval_min


@click.command('round-word', context_settings={'ignore_unknown_options': True})
@with_appcontext
@click.argument('round_start_ms', type=int)
@click.option('--interval', 'interval_min', type=int, default=None, help='Round length in minutes.')
@click.option('--reveal', is_flag=True, help='Include the answer in the output.')
def round_word_command(round_start_ms, interval_min, reveal):
    """Print the scrambled word for the round starting at ROUND_START_MS."""
    interval_min = _interval_or_default(interval_min)
    key = round_key(interval_min, round_start_ms)
    result = _derive(round_start_ms, interval_min)
    current_app.logger.info(f"[round-word] key={key}")
    payload = {
        'round_key': key,
        'interval_min': interval_min,
        'round_start_ms': round_start_ms,
        'scrambled': result.scrambled,
    }
    if reveal:
        payload['word'] = result.word
    click.echo(json.dumps(payload))


@click.command('current-round')
@with_appcontext
@click.option('--now-ms', 'at_ms', type=int, default=None, help='Evaluate at this epoch-ms instead of the clock.')
@click.option('--reveal', is_flag=True, help='Include the answer in the output.')
def current_round_command(at_ms, reveal):
    """Print the live round (or the next drop) under the configured schedule."""
    now = at_ms if at_ms is not None else now_ms()
    state = _state()
    window = current_round(now, state['schedule'], state['answer_window_ms'])
    result = _derive(window.start_ms, window.interval_minutes)
    current_app.logger.info(
        f"[current-round] now={now} interval={window.interval_minutes} start={window.start_ms} active={window.active}"
    )
    payload = window.to_dict()
    payload['round_key'] = round_key(window.interval_minutes, window.start_ms)
    payload['scrambled'] = result.scrambled
    if reveal:
        payload['word'] = result.word
    click.echo(json.dumps(payload))


@click.command('check-guess', context_settings={'ignore_unknown_options': True})
@with_appcontext
@click.argument('round_start_ms', type=int)
@click.argument('guess')
@click.option('--interval', 'interval_min', type=int, default=None, help='Round length in minutes.')
def check_guess_command(round_start_ms, guess, interval_min):
    """Check GUESS against the word of the round starting at ROUND_START_MS."""
    interval_min = _interval_or_default(interval_min)
    result = _derive(round_start_ms, interval_min)
    correct = is_correct_guess(guess, result.word)
    current_app.logger.info(f"[check-guess] key={round_key(interval_min, round_start_ms)} correct={correct}")
    click.echo('correct' if correct else 'wrong')
    if not correct:
        raise click.exceptions.Exit(1)


@click.command('rank', context_settings={'ignore_unknown_options': True})
@click.argument('points', type=int)
def rank_command(points):
    """Print the rank tier for a points total."""
    click.echo(get_rank(points))


def register_cli_commands(flask_app) -> None:
    """Register the quickword commands on the app's `flask` CLI group."""
    flask_app.cli.add_command(round_word_command)
    flask_app.cli.add_command(current_round_command)
    flask_app.cli.add_command(check_guess_command)
    flask_app.cli.add_command(rank_command)
