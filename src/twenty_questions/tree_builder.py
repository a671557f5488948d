"""
Tree Builder - Builds the question tree used by a game session.

At every node the builder greedily picks the question whose answers split
the remaining characters most evenly, then recurses on the "yes" and "no"
subsets with that question removed from the pool.
"""

from typing import AbstractSet, List, Optional, Sequence

from .errors import PreconditionViolation
from .logging_config import setup_logger
from .models import DecisionNode, QuestionRecord

logger = setup_logger(__name__)

IDENTIFIED_TEXT = "Character identified: {character_id}"
NO_MORE_QUESTIONS_TEXT = "No more questions. Unable to identify."
UNDIFFERENTIATED_TEXT = "Unable to further differentiate."
NO_CANDIDATES_TEXT = "No characters remain."


def balance_score(remaining: AbstractSet[int], question: QuestionRecord) -> int:
    """How unevenly `question` splits `remaining` (0 is a perfect split)."""
    return abs(len(remaining & question.positive) - len(remaining & question.negative))


def build_tree(remaining: AbstractSet[int], pool: Sequence[QuestionRecord]) -> DecisionNode:
    """
    Build a question tree that discriminates among `remaining`.

    Args:
        remaining: Non-empty set of candidate character IDs
        pool: Available questions, in the order used for tie-breaking

    Returns:
        Root node of the tree. The pool itself is left untouched.
    """
    if not remaining:
        raise PreconditionViolation("cannot build a question tree for an empty set of characters")

    root = _build(frozenset(remaining), list(pool))
    logger.info(f"Built question tree over {len(remaining)} characters "
                f"(depth {tree_depth(root)}, {leaf_count(root)} leaves)")
    return root


def _build(remaining: frozenset, pool: List[QuestionRecord]) -> DecisionNode:
    """
    Expand the tree top-down with an explicit stack, then assemble the frozen
    nodes bottom-up. A path can be as long as the pool, which may exceed the
    interpreter's recursion limit.
    """
    # Each slot holds a finished leaf or [question, left_slot, right_slot]
    slots = []
    pending = [(remaining, pool, None, None)]

    while pending:
        remaining, pool, parent_slot, side = pending.pop()
        slot = len(slots)
        if parent_slot is not None:
            slots[parent_slot][side] = slot

        leaf_text = _terminal_text(remaining, pool)
        best_question = None
        if leaf_text is None:
            best_question = _select_question(remaining, pool)
            if best_question is None:
                leaf_text = UNDIFFERENTIATED_TEXT

        if leaf_text is not None:
            slots.append(DecisionNode.leaf(leaf_text))
            continue

        pos_ids = remaining & best_question.positive
        neg_ids = remaining & best_question.negative
        remaining_questions = [q for q in pool if q is not best_question]

        logger.debug(f"Question {best_question.id} splits {len(remaining)} characters "
                     f"into {len(pos_ids)} yes / {len(neg_ids)} no")

        slots.append([best_question, None, None])
        pending.append((neg_ids, remaining_questions, slot, 2))
        pending.append((pos_ids, remaining_questions, slot, 1))

    # Children always sit in later slots than their parent
    for slot in reversed(range(len(slots))):
        entry = slots[slot]
        if isinstance(entry, list):
            question, left_slot, right_slot = entry
            slots[slot] = DecisionNode(
                question_id=question.id,
                text=question.text,
                positive=question.positive,
                negative=question.negative,
                left=slots[left_slot],
                right=slots[right_slot],
            )

    return slots[0]


def _terminal_text(remaining: frozenset, pool: List[QuestionRecord]) -> Optional[str]:
    """Leaf message when no question should be asked for `remaining`, else None."""
    if not remaining:
        # A question that does not cover every candidate can leave one side empty
        return NO_CANDIDATES_TEXT

    if len(remaining) == 1:
        (character_id,) = remaining
        return IDENTIFIED_TEXT.format(character_id=character_id)

    if not pool:
        return NO_MORE_QUESTIONS_TEXT

    return None


def _select_question(remaining: frozenset, pool: List[QuestionRecord]) -> Optional[QuestionRecord]:
    """First question in pool order with the lowest balance score."""
    best_question = None
    min_difference = None

    for question in pool:
        difference = balance_score(remaining, question)
        if min_difference is None or difference < min_difference:
            min_difference = difference
            best_question = question

    return best_question


def tree_depth(node: DecisionNode) -> int:
    """Number of questions on the longest path from `node` to a leaf."""
    depth = 0
    stack = [(node, 0)]
    while stack:
        node, level = stack.pop()
        if node.is_leaf:
            depth = max(depth, level)
        else:
            stack.append((node.left, level + 1))
            stack.append((node.right, level + 1))
    return depth


def leaf_count(node: DecisionNode) -> int:
    count = 0
    stack = [node]
    while stack:
        node = stack.pop()
        if node.is_leaf:
            count += 1
        else:
            stack.extend((node.left, node.right))
    return count
