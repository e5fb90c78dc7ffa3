"""
Game Configuration Constants Module

This module defines the game rules and the curated word list.
All game parameters are centralized here to enable easy modification.
"""

import json
import os
from typing import Final, List, Sequence

WORD_LENGTH: Final[int] = 5
"""Number of characters in every secret word and every guess."""

MAX_GUESSES: Final[int] = 5
"""
Maximum number of accepted guesses per game.
Type: Final[int] - Immutable to prevent accidental modification
"""


def _load_word_list() -> List[str]:
    """
    Load word list from words.json next to this module.

    Returns:
        List[str]: List of lowercase 5-letter words

    Raises:
        FileNotFoundError: If words.json file is not found
        ValueError: If the JSON is malformed, the list is empty or contains invalid words
    """
    config_dir = os.path.dirname(os.path.abspath(__file__))
    json_file_path = os.path.join(config_dir, 'words.json')

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in words.json: {e}") from e

    if not isinstance(word_list, list):
        raise ValueError("JSON file must contain an array of words")

    validate_word_list_integrity(word_list)
    return word_list


def validate_word_list_integrity(words: Sequence[str]) -> bool:
    """
    Validates the integrity and consistency of a word list.

    This function performs validation to ensure:
    1. Length validation: All words must be exactly WORD_LENGTH characters
    2. Character validation: Only alphabetic characters allowed
    3. Format validation: Consistent lowercase formatting
    4. Uniqueness validation: No duplicate entries

    Returns:
        bool: True if word list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if not words:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(words):
        if not isinstance(word, str) or len(word) != WORD_LENGTH:
            raise ValueError(f"Word at index {index} '{word}' is not {WORD_LENGTH} characters long")

        if not word.isalpha():
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if not word.islower():
            raise ValueError(f"Word at index {index} '{word}' is not in lowercase format")

    if len(words) != len(set(words)):
        duplicates = sorted({word for word in words if words.count(word) > 1})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return True


# Curated Word Database loaded from JSON file
WORD_LIST: Final[List[str]] = _load_word_list()
