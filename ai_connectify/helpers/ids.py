"""Random identifiers for generated artifacts."""

import random

from ..config.constants import RANDOM_ID_ALPHABET, RANDOM_ID_LENGTH


def generate_random_id() -> str:
    """16 characters from [A-Za-z0-9]. Not suitable for anything secret."""
    return "".join(random.choices(RANDOM_ID_ALPHABET, k=RANDOM_ID_LENGTH))
