"""
Game Coordinator - Plays a game session against a presentation layer.

The coordinator acts as the game master: it asks the current question,
feeds each answer to the session, and announces the result when the tree
runs out of questions.
"""

from typing import AbstractSet, Callable, List, Optional, Sequence

import click

from .errors import NotFoundError
from .logging_config import setup_logger
from .models import Character, Exhausted, Identified, QuestionRecord
from .records import UNKNOWN_CHARACTER_ID, CharacterResolver, read_questions_from_csv
from .session import GameSession
from .tree_builder import build_tree

logger = setup_logger(__name__)

NO_MATCH_TEXT = "No character matches your answers."


def new_session(questions: Sequence[QuestionRecord], universe: AbstractSet[int]) -> GameSession:
    """Build a question tree over `universe` and start a session on it."""
    root = build_tree(universe, questions)
    return GameSession(root, universe)


class GameCoordinator:
    """Coordinates one game between a session and the player."""

    def __init__(self, session: GameSession, resolver: CharacterResolver,
                 ask: Callable[[str], bool], announce: Callable[[str], None]):
        self.session = session
        self.resolver = resolver
        self.ask = ask
        self.announce = announce
        self.game_log: List[dict] = []

    def add_question(self, question: str, answer: bool):
        """Add a question/answer pair to the game log."""
        self.game_log.append({
            'turn': len(self.game_log) + 1,
            'question': question,
            'answer': answer,
            'remaining': len(self.session.remaining),
        })

    def run(self) -> Optional[Character]:
        """Ask questions until the session is done, then announce the result."""
        while not self.session.is_done:
            question = self.session.current_question_text()
            answer = self.ask(question)
            self.session.apply_answer(answer)
            self.add_question(question, answer)
            logger.info(f"Q{len(self.game_log)}: {question} -> {'yes' if answer else 'no'} "
                        f"({len(self.session.remaining)} characters remain)")

        return self.end_game()

    def end_game(self) -> Optional[Character]:
        result = self.session.current_result()

        if isinstance(result, Identified):
            character = self.resolver.resolve(result.character_id)
            logger.info(f"Game over! Identified {character.name} after {len(self.game_log)} questions")
            self.announce(f"You are thinking of {character.name}!")
            return character

        if isinstance(result, Exhausted):
            logger.warning("Game over! Every character was eliminated")
            try:
                unknown = self.resolver.resolve(UNKNOWN_CHARACTER_ID)
            except NotFoundError:
                self.announce(NO_MATCH_TEXT)
                return None
            self.announce(f"{NO_MATCH_TEXT} ({unknown.name})")
            return unknown

        logger.info(f"Game over! {len(self.session.remaining)} characters could not be told apart")
        self.announce(self.session.current_question_text())
        return None


def coordinator_main(questions_csv: str, characters_csv: str, universe: AbstractSet[int]):
    """Main entry point for an interactive game on the terminal."""
    questions = read_questions_from_csv(questions_csv)
    session = new_session(questions, universe)
    resolver = CharacterResolver(characters_csv)

    coordinator = GameCoordinator(
        session,
        resolver,
        ask=lambda text: click.confirm(text),
        announce=click.echo,
    )
    return coordinator.run()
