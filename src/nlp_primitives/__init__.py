"""
nlp_primitives
==============

Does: Root package for the text-preprocessing primitives.
Returns: The four public operations (tokenize, is_boundary_token, expand_clitic,
         edit_distance) plus the Token model.
Used by: All imports starting from `nlp_primitives.*` and the demo CLI.
"""

from nlp_primitives.preprocessing.fuzzy import edit_distance
from nlp_primitives.preprocessing.token import expand_clitic, is_boundary_token, tokenize
from nlp_primitives.preprocessing.types import Token, TokenType

__all__: list[str] = [
    "Token",
    "TokenType",
    "tokenize",
    "is_boundary_token",
    "expand_clitic",
    "edit_distance",
]
__docformat__ = "google"
