from itertools import product

import pytest

from conftest import question
from twenty_questions.errors import PreconditionViolation
from twenty_questions.models import Exhausted, Identified, Undetermined
from twenty_questions.session import GameSession, SessionState
from twenty_questions.tree_builder import NO_MORE_QUESTIONS_TEXT, build_tree


def new_game(universe, pool):
    return GameSession(build_tree(universe, pool), universe)


def end_to_end_pool():
    return [question(1, {1}, {2, 3}, text="Is it Merlin?"),
            question(2, {2}, {1, 3}, text="Is it Indiana?")]


def test_initial_state_asks_first_question():
    session = new_game({1, 2, 3}, end_to_end_pool())
    assert session.state is SessionState.ASKING
    assert not session.is_done
    assert session.current_question_text() == "Is it Merlin?"
    assert session.current_result() == Undetermined()
    assert session.remaining == frozenset({1, 2, 3})


def test_yes_identifies_first_character():
    session = new_game({1, 2, 3}, end_to_end_pool())
    session.apply_answer(True)
    assert session.remaining == frozenset({1})
    assert session.current_result() == Identified(1)
    assert session.is_done
    assert session.current_question_text() == "Character identified: 1"


@pytest.mark.parametrize("second_answer, expected", [(True, 2), (False, 3)])
def test_no_then_second_question(second_answer, expected):
    session = new_game({1, 2, 3}, end_to_end_pool())
    session.apply_answer(False)
    assert session.remaining == frozenset({2, 3})
    assert session.current_result() == Undetermined()
    assert session.current_question_text() == "Is it Indiana?"

    session.apply_answer(second_answer)
    assert session.current_result() == Identified(expected)
    assert session.state is SessionState.DONE
    assert session.answers == [False, second_answer]


def test_single_character_universe_starts_done():
    session = new_game({5}, end_to_end_pool())
    assert session.state is SessionState.DONE
    assert session.current_result() == Identified(5)
    with pytest.raises(PreconditionViolation):
        session.apply_answer(True)


def test_empty_pool_cannot_advance():
    session = new_game({1, 2, 3}, [])
    assert session.is_done
    assert session.current_question_text() == NO_MORE_QUESTIONS_TEXT
    assert session.current_result() == Undetermined()
    with pytest.raises(PreconditionViolation):
        session.apply_answer(False)
    assert session.remaining == frozenset({1, 2, 3})


def test_answer_after_done_is_rejected():
    session = new_game({1, 2, 3}, end_to_end_pool())
    session.apply_answer(True)
    with pytest.raises(PreconditionViolation):
        session.apply_answer(True)
    assert session.current_result() == Identified(1)


@pytest.mark.parametrize("answer", [True, False])
def test_uncovered_character_is_eliminated(answer):
    session = new_game({1, 2, 3}, [question(1, {1}, {2})])
    session.apply_answer(answer)
    assert 3 not in session.remaining
    assert session.current_result() == Identified(1 if answer else 2)


def test_every_character_eliminated_is_exhausted():
    session = new_game({1, 2, 3}, [question(1, {1, 2, 3}, set())])
    session.apply_answer(False)
    assert session.remaining == frozenset()
    assert session.current_result() == Exhausted()
    assert session.is_done


def test_narrowing_is_monotonic():
    universe = {1, 2, 3, 4, 5, 6}
    pool = [
        question(1, {1, 2, 3}, {4, 5, 6}),
        question(2, {1, 4}, {2, 3, 5, 6}),
        question(3, {2, 5, 6}, {1, 3, 4}),
        question(4, {6}, {1, 2, 3, 4}),
    ]
    root = build_tree(universe, pool)

    for answers in product([True, False], repeat=len(pool)):
        session = GameSession(root, universe)
        sizes = [len(session.remaining)]
        for answer in answers:
            if session.is_done:
                break
            session.apply_answer(answer)
            sizes.append(len(session.remaining))
        assert sizes == sorted(sizes, reverse=True)


def test_sessions_sharing_a_tree_are_independent():
    root = build_tree({1, 2, 3}, end_to_end_pool())
    first = GameSession(root, {1, 2, 3})
    second = GameSession(root, {1, 2, 3})

    first.apply_answer(True)
    assert second.remaining == frozenset({1, 2, 3})
    assert second.current_question_text() == "Is it Merlin?"
    assert root == build_tree({1, 2, 3}, end_to_end_pool())


def test_long_undifferentiated_tree_ends_undetermined():
    pool = [question(i, {1, 2}, set()) for i in range(1500)]
    session = new_game({1, 2}, pool)

    while not session.is_done:
        session.apply_answer(True)

    assert len(session.answers) == 1500
    assert session.current_question_text() == NO_MORE_QUESTIONS_TEXT
    assert session.current_result() == Undetermined()
