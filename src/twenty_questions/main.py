#!/usr/bin/env python3
"""
Main entry point for Twenty Questions.

This module provides the CLI interface for playing a game and inspecting
the question tree built from a set of records.
"""

import json
import os
from typing import FrozenSet, Optional

import click

from .config import get_settings, make_universe
from .errors import GameError


def _setting(name: str):
    """Configured default for an option that was not given on the command line."""
    try:
        return getattr(get_settings(), name)
    except ValueError as e:
        raise click.ClickException(f"Invalid configuration: {e}") from e


def _universe(universe_size: Optional[int]) -> FrozenSet[int]:
    if universe_size is None:
        return _setting('universe')
    try:
        return make_universe(universe_size)
    except ValueError as e:
        raise click.ClickException(str(e)) from e


def _records_options(f):
    f = click.option('--universe-size', type=int,
                     help='Number of characters; IDs run from 1 to this value [default: $UNIVERSE_SIZE or 32]')(f)
    f = click.option('--questions', 'questions_csv',
                     help='CSV file with question records [default: $QUESTIONS_CSV or questions.csv]')(f)
    return f


@click.group()
@click.version_option(package_name='twenty-questions')
@click.option('--log-level', default='INFO', envvar='LOG_LEVEL', show_envvar=True,
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              help='Set logging level')
def cli(log_level):
    """ Twenty Questions - think of a character and answer yes or no!

    Questions are chosen from a decision tree that splits the remaining
    characters as evenly as possible at every step.

    Commands:
    - play: answer questions until your character is identified
    - show-tree: print the question tree as JSON
    """
    # Loggers are created when command modules are imported below
    os.environ['LOG_LEVEL'] = log_level.upper()


@cli.command()
@_records_options
@click.option('--characters', 'characters_csv',
              help='CSV file with character records [default: $CHARACTERS_CSV or characters.csv]')
def play(questions_csv, universe_size, characters_csv):
    """ Play a game - think of a character and answer the questions."""
    from .game_coordinator import coordinator_main
    universe = _universe(universe_size)
    try:
        coordinator_main(questions_csv or _setting('questions_csv'),
                         characters_csv or _setting('characters_csv'),
                         universe)
    except (GameError, FileNotFoundError) as e:
        raise click.ClickException(str(e)) from e


@cli.command(name='show-tree')
@_records_options
def show_tree(questions_csv, universe_size):
    """ Print the question tree built from the records as JSON."""
    from .records import read_questions_from_csv
    from .tree_builder import build_tree, leaf_count, tree_depth
    universe = _universe(universe_size)
    try:
        questions = read_questions_from_csv(questions_csv or _setting('questions_csv'))
        root = build_tree(universe, questions)
    except (GameError, FileNotFoundError) as e:
        raise click.ClickException(str(e)) from e

    click.echo(json.dumps({
        'depth': tree_depth(root),
        'leaves': leaf_count(root),
        'tree': root.to_dict(),
    }, indent=2))


if __name__ == '__main__':
    cli()
