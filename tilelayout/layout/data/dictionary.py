# Reference word list offered by the suggestion scorer.

from pathlib import Path
from typing import List

from ..parsing import sanitize_words


DICTIONARY = (
    'FAMILY', 'LOVE', 'HOME', 'HAPPY', 'SMILE', 'DREAM', 'PEACE', 'CHILL',
    'CREATE', 'EXPLORE', 'ADVENTURE', 'RELAX',
    'TINO', 'MAMA', 'PAPA', 'DAD', 'MOM', 'HERZ', 'GLUECK', 'FREUDE', 'REISE',
    'SONNE', 'NATUR', 'KREATIV',
    'PLA', 'PRINT', 'DRUCK', 'DESIGN', 'MAKER', 'POWER', 'TEAM', 'WEEKEND',
    'PARTY', 'COFFEE', 'MUSIC', 'MOVIE',
    'GAMING', 'TOOLS', 'HOUSE', 'GARDEN', 'KITCHEN', 'OFFICE', 'IDEA', 'SMART',
    'FOCUS', 'BALANCE', 'ENERGY',
)


def load_dictionary(path: str | Path) -> List[str]:
    '''
    Load a word file, one word per line (commas and semicolons also separate).
    Words are sanitized the same way as user input.
    '''
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Dictionary file not found: {path}")
    return sanitize_words(path.read_text(encoding="utf-8"))
