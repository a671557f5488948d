import pytest

from twenty_questions.models import QuestionRecord


def question(qid, positive, negative, text=None):
    return QuestionRecord(qid, text or f"Question {qid}?", frozenset(positive), frozenset(negative))


@pytest.fixture
def write_csv(tmp_path):
    def _write(name: str, content: str) -> str:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return str(path)
    return _write


@pytest.fixture
def questions_csv(write_csv):
    return write_csv("questions.csv", (
        "id,text,positive,negative\n"
        "1,\"Is your character a wizard?\",{1},{2.3}\n"
        "2,\"Does your character wear a hat?\",{2},{1.3}\n"
    ))


@pytest.fixture
def characters_csv(write_csv):
    return write_csv("characters.csv", (
        "id,name,image_path\n"
        "1,Merlin,images/merlin.png\n"
        "2,Indiana,images/indiana.png\n"
        "3,Sherlock,images/sherlock.png\n"
    ))
