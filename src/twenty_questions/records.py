"""
Question and character records stored as CSV files.

questions.csv columns:  id, text, positive, negative
characters.csv columns: id, name, image_path

Sets of character IDs are written as "{1.2.3}". The first row of each file
is a header and is skipped.
"""

import csv
from typing import Dict, FrozenSet, List, Optional

from .errors import NotFoundError, RecordParseError
from .logging_config import setup_logger
from .models import Character, QuestionRecord

logger = setup_logger(__name__)

# ID a caller may look up to display "no character matched"
UNKNOWN_CHARACTER_ID = 0


def parse_id_set(text: str) -> FrozenSet[int]:
    """
    Parse a set of character IDs such as "{1.2.3}".

    Raises:
        RecordParseError: if braces are missing or an item is not an integer
    """
    text = text.strip()
    if len(text) < 2 or text[0] != '{' or text[-1] != '}':
        raise RecordParseError(f"malformed ID set {text!r}: expected '{{1.2.3}}'")

    numbers = text[1:-1].strip()
    if not numbers:
        return frozenset()

    try:
        return frozenset(int(item) for item in numbers.split('.'))
    except ValueError:
        raise RecordParseError(f"malformed ID set {text!r}: items must be integers") from None


def _parse_id(text: str, line: int) -> int:
    try:
        return int(text.strip())
    except ValueError:
        raise RecordParseError(f"invalid ID {text!r}", line) from None


def read_questions_from_csv(path: str) -> List[QuestionRecord]:
    """
    Read question records in file order.

    The order matters: when two questions split the candidates equally
    well, the tree builder keeps the one listed first.
    """
    questions = []
    try:
        with open(path, newline='', encoding='utf-8') as f:
            reader = csv.reader(f)
            next(reader, None)

            for row in reader:
                line = reader.line_num
                if not row:
                    continue
                if len(row) < 4:
                    raise RecordParseError(f"expected 4 fields (id,text,positive,negative), got {len(row)}", line)

                id_str, text, true_set, false_set = row[:4]
                try:
                    positive = parse_id_set(true_set)
                    negative = parse_id_set(false_set)
                except RecordParseError as e:
                    raise RecordParseError(str(e), line) from None

                questions.append(QuestionRecord(_parse_id(id_str, line), text.strip(), positive, negative))
    except FileNotFoundError:
        logger.error(f"Error opening questions file: {path}")
        raise

    logger.info(f"Loaded {len(questions)} questions from {path}")
    return questions


class CharacterResolver:
    """Looks up character display records by ID."""

    def __init__(self, path: str):
        self.path = path
        self._characters: Optional[Dict[int, Character]] = None

    def _load(self) -> Dict[int, Character]:
        characters = {}
        try:
            with open(self.path, newline='', encoding='utf-8') as f:
                reader = csv.reader(f)
                next(reader, None)

                for row in reader:
                    line = reader.line_num
                    if not row:
                        continue
                    if len(row) < 3:
                        raise RecordParseError(f"expected 3 fields (id,name,image_path), got {len(row)}", line)
                    character_id = _parse_id(row[0], line)
                    # first row wins for a repeated ID
                    characters.setdefault(character_id, Character(character_id, row[1].strip(), row[2].strip()))
        except FileNotFoundError:
            logger.error(f"Error opening characters file: {self.path}")
            raise

        logger.info(f"Loaded {len(characters)} characters from {self.path}")
        return characters

    def resolve(self, character_id: int) -> Character:
        """
        Return the character with the given ID.

        Raises:
            NotFoundError: if no record has that ID
        """
        if self._characters is None:
            self._characters = self._load()

        try:
            return self._characters[character_id]
        except KeyError:
            raise NotFoundError(character_id) from None
