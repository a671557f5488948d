"""
Game Session - Walks a question tree one answer at a time.

A session owns its position in the tree and the set of characters still
consistent with the answers given so far. The tree itself is never
modified, so any number of sessions can share one tree.
"""

from enum import Enum
from typing import AbstractSet, FrozenSet, List

from .errors import PreconditionViolation
from .logging_config import setup_logger
from .models import DecisionNode, Exhausted, Identified, Outcome, Undetermined

logger = setup_logger(__name__)


class SessionState(str, Enum):
    ASKING = "asking"
    DONE = "done"


class GameSession:
    """Tracks the current question and the remaining characters of one game."""

    def __init__(self, root: DecisionNode, universe: AbstractSet[int]):
        self._node = root
        self._remaining = frozenset(universe)
        self.answers: List[bool] = []

    @property
    def remaining(self) -> FrozenSet[int]:
        return self._remaining

    @property
    def state(self) -> SessionState:
        return SessionState.DONE if self._node.is_leaf else SessionState.ASKING

    @property
    def is_done(self) -> bool:
        return self.state is SessionState.DONE

    def current_question_text(self) -> str:
        """Text of the current question, or the terminal message once done."""
        return self._node.text

    def current_result(self) -> Outcome:
        if len(self._remaining) > 1:
            return Undetermined()
        if len(self._remaining) == 1:
            (character_id,) = self._remaining
            return Identified(character_id)
        return Exhausted()

    def apply_answer(self, answer: bool) -> None:
        """
        Record a yes/no answer to the current question and move to the next node.

        The remaining set is narrowed with the current question's full sets
        before descending: "yes" drops the characters the question rules out
        on a yes (its negative set), "no" drops its positive set. Characters
        the question covers on neither side are dropped as well, since the
        tree below this node cannot reach them.

        Raises:
            PreconditionViolation: if the session is already done
        """
        node = self._node
        if node.is_leaf:
            raise PreconditionViolation("cannot answer: the game is already over")

        before = len(self._remaining)
        covered = node.positive | node.negative
        if answer:
            self._remaining = (self._remaining - node.negative) & covered
            self._node = node.left
        else:
            self._remaining = (self._remaining - node.positive) & covered
            self._node = node.right
        self.answers.append(answer)

        logger.debug(f"Question {node.question_id} answered {'yes' if answer else 'no'}: "
                     f"{before} -> {len(self._remaining)} characters remain")
