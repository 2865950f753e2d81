"""
ucc_profiling/similarity.py
===========================
String-similarity measures used as comparators by duplicate detection and
schema matching.

Every measure maps a pair of inputs to a score in [0, 1]; 1 means identical.
An input is either a string or an ordered list of string tokens:

  Levenshtein               1 - edit distance / max(len)   (chars or tokens)
  Jaccard                   |A ∩ B| / |A ∪ B|               set semantics
                            |A ∩ B| / (|A| + |B|)           bag semantics, max 1/2
  LocalitySensitiveHashing  Jaccard of two MinHash signatures

Strings are split into q-grams by a Tokenizer before the set-based measures
see them; Levenshtein works on the characters of a string.
"""

from __future__ import annotations

import zlib
from abc import ABC, abstractmethod
from collections import Counter
from typing import Sequence, Union

import numpy as np

Tokens = Sequence[str]
Comparable = Union[str, Tokens]

# Mersenne prime 2^31 - 1 keeps a * x + b inside int64
_PRIME: int = (1 << 31) - 1


class Tokenizer:
    """
    q-gram tokenizer.

    With padding, ``q - 1`` pad characters are added on both sides so the
    first and last characters start and end a q-gram of their own.  A string
    shorter than ``q`` (after padding) becomes a single token.
    """

    PAD = "#"

    def __init__(self, token_size: int = 3, padding: bool = True) -> None:
        if token_size < 1:
            raise ValueError(f"token_size must be >= 1, got {token_size}")
        self.token_size = token_size
        self.padding = padding

    def tokenize(self, string: str | None) -> list[str]:
        string = string or ""
        if self.padding and string:
            pad = self.PAD * (self.token_size - 1)
            string = f"{pad}{string}{pad}"
        if not string:
            return []
        if len(string) <= self.token_size:
            return [string]
        return [
            string[i:i + self.token_size]
            for i in range(len(string) - self.token_size + 1)
        ]


class SimilarityMeasure(ABC):
    """A pairwise similarity in [0, 1] over strings or token lists."""

    def calculate(self, left: Comparable | None, right: Comparable | None) -> float:
        if left is None:
            left = ""
        if right is None:
            right = ""
        return self.calculate_tokens(self._tokens(left), self._tokens(right))

    @abstractmethod
    def calculate_tokens(self, left: Tokens, right: Tokens) -> float:
        ...

    @abstractmethod
    def _tokens(self, value: Comparable) -> list[str]:
        ...


class Levenshtein(SimilarityMeasure):
    """
    ``1 - distance / max(len(left), len(right))``.

    With ``with_damerau`` an adjacent transposition costs one edit (optimal
    string alignment distance).  Two empty inputs are identical.
    """

    def __init__(self, with_damerau: bool = False) -> None:
        self.with_damerau = with_damerau

    def _tokens(self, value: Comparable) -> list[str]:
        return list(value)

    def distance(self, left: Tokens, right: Tokens) -> int:
        m, n = len(left), len(right)
        # three rolling rows of the DP table: j-2, j-1, j
        before_upper = np.zeros(m + 1, dtype=np.int64)
        upper = np.arange(m + 1, dtype=np.int64)
        lower = np.zeros(m + 1, dtype=np.int64)

        for j in range(1, n + 1):
            lower[0] = j
            for i in range(1, m + 1):
                cost = 0 if left[i - 1] == right[j - 1] else 1
                lower[i] = min(lower[i - 1] + 1, upper[i] + 1, upper[i - 1] + cost)
                if (
                    self.with_damerau and i > 1 and j > 1
                    and left[i - 1] == right[j - 2]
                    and left[i - 2] == right[j - 1]
                ):
                    lower[i] = min(lower[i], before_upper[i - 2] + cost)
            before_upper, upper, lower = upper, lower, before_upper
        return int(upper[m])

    def calculate_tokens(self, left: Tokens, right: Tokens) -> float:
        longest = max(len(left), len(right))
        if longest == 0:
            return 1.0
        return 1.0 - self.distance(left, right) / longest


class Jaccard(SimilarityMeasure):
    """
    Jaccard similarity of the token sets (or token bags) of two inputs.

    Bag semantics divide the multiset intersection by the summed input
    sizes, so identical bags score 1/2.  Two empty inputs score the maximum
    (1 for sets, 1/2 for bags).
    """

    def __init__(self, tokenizer: Tokenizer | None = None, bag_semantics: bool = False) -> None:
        self.tokenizer = tokenizer or Tokenizer()
        self.bag_semantics = bag_semantics

    def _tokens(self, value: Comparable) -> list[str]:
        if isinstance(value, str):
            return self.tokenizer.tokenize(value)
        return list(value)

    def calculate_tokens(self, left: Tokens, right: Tokens) -> float:
        if self.bag_semantics:
            total = len(left) + len(right)
            if total == 0:
                return 0.5
            shared = sum((Counter(left) & Counter(right)).values())
            return shared / total

        left_set, right_set = set(left), set(right)
        union = left_set | right_set
        if not union:
            return 1.0
        return len(left_set & right_set) / len(union)


class MinHash:
    """
    One MinHash function: the token with the smallest seeded hash.

    Tokens are hashed with CRC-32 and then with the universal hash
    ``(a * x + b) mod p`` whose coefficients come from the seed, so the
    signature is stable across processes.
    """

    def __init__(self, seed: int) -> None:
        rng = np.random.default_rng(seed)
        self.seed = seed
        self.a = int(rng.integers(1, _PRIME))
        self.b = int(rng.integers(0, _PRIME))

    def hash(self, tokens: Tokens) -> str:
        if not tokens:
            return ""
        x = np.array([zlib.crc32(t.encode("utf-8")) % _PRIME for t in tokens], dtype=np.int64)
        values = (self.a * x + self.b) % _PRIME
        return tokens[int(np.argmin(values))]


class LocalitySensitiveHashing(SimilarityMeasure):
    """Approximate Jaccard: Jaccard of the two MinHash signatures."""

    def __init__(
        self,
        tokenizer: Tokenizer | None = None,
        bag_semantics: bool = False,
        num_hash_functions: int = 16,
    ) -> None:
        if num_hash_functions < 1:
            raise ValueError(f"num_hash_functions must be >= 1, got {num_hash_functions}")
        self.tokenizer = tokenizer or Tokenizer()
        self.bag_semantics = bag_semantics
        self.min_hashes = [MinHash(seed) for seed in range(num_hash_functions)]
        self._jaccard = Jaccard(self.tokenizer, bag_semantics)

    def _tokens(self, value: Comparable) -> list[str]:
        if isinstance(value, str):
            return self.tokenizer.tokenize(value)
        return list(value)

    def signature(self, tokens: Tokens) -> list[str]:
        return [h.hash(tokens) for h in self.min_hashes]

    def calculate_tokens(self, left: Tokens, right: Tokens) -> float:
        return self._jaccard.calculate_tokens(self.signature(left), self.signature(right))
