"""
Data model for questions, characters, the decision tree and game outcomes.
"""

from dataclasses import dataclass
from typing import FrozenSet, Optional

# question_id carried by leaf nodes
SENTINEL = -1


@dataclass(frozen=True)
class QuestionRecord:
    """One yes/no question and the characters each answer is consistent with."""

    id: int
    text: str
    positive: FrozenSet[int]
    negative: FrozenSet[int]


@dataclass(frozen=True)
class Character:
    """Display attributes of a character."""

    character_id: int
    name: str
    image_path: str


@dataclass(frozen=True)
class DecisionNode:
    """
    A node of the question tree.

    Internal nodes carry a question, the question's full positive/negative
    sets, and both children ("yes" on the left, "no" on the right). Leaves
    carry SENTINEL as question_id and a terminal message as text.
    """

    question_id: int
    text: str
    positive: FrozenSet[int] = frozenset()
    negative: FrozenSet[int] = frozenset()
    left: Optional["DecisionNode"] = None
    right: Optional["DecisionNode"] = None

    @classmethod
    def leaf(cls, text: str) -> "DecisionNode":
        return cls(SENTINEL, text)

    @property
    def is_leaf(self) -> bool:
        return self.question_id == SENTINEL and self.left is None and self.right is None

    def to_dict(self) -> dict:
        """Nested, JSON-ready description of this subtree."""
        result = {}
        stack = [(self, result)]
        while stack:
            node, out = stack.pop()
            if node.is_leaf:
                out.update(leaf=True, text=node.text)
                continue

            yes, no = {}, {}
            out.update({
                'question_id': node.question_id,
                'text': node.text,
                'positive': sorted(node.positive),
                'negative': sorted(node.negative),
                'yes': yes,
                'no': no,
            })
            stack.append((node.left, yes))
            stack.append((node.right, no))
        return result


class Outcome:
    """Result of a game session at a given point."""


@dataclass(frozen=True)
class Undetermined(Outcome):
    """More than one character is still in play."""


@dataclass(frozen=True)
class Identified(Outcome):
    """Exactly one character remains."""

    character_id: int


@dataclass(frozen=True)
class Exhausted(Outcome):
    """Every character was eliminated by the answers given."""
