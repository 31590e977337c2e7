# Helpers for cleaning upstream text and randomizing answer order
# trivia_proxy/services/text_utils.py
import random
from typing import List, Optional, TypeVar

T = TypeVar("T")

# Applied in order; &amp; is not the last step, so "&amp;lt;" ends up as "<".
HTML_ENTITY_REPLACEMENTS = (
    ("&quot;", '"'),
    ("&#039;", "'"),
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
)

def decode_html_entities(text: str) -> str:
    """Decodes the handful of entities the trivia provider emits."""
    for entity, replacement in HTML_ENTITY_REPLACEMENTS:
        text = text.replace(entity, replacement)
    return text

def fisher_yates_shuffle(items: List[T], rng: Optional[random.Random] = None) -> List[T]:
    """
    Shuffles `items` in place with an unbiased Fisher-Yates pass and returns it.
    Pass a seeded `random.Random` for reproducible ordering.
    """
    rng = rng or random
    for i in range(len(items) - 1, 0, -1):
        j = rng.randint(0, i)
        items[i], items[j] = items[j], items[i]
    return items
