"""
Exhaustive analysis over the S-DES key and block spaces.

Both spaces are small (1024 keys, 256 blocks), so every question here is
answered by enumeration rather than by anything clever.
"""
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np
from tqdm import tqdm

from src.sdes import (
    BLOCK_BITS,
    KEY_BITS,
    encrypt,
    from_bitstring,
    generate_subkeys,
    to_bitstring,
)

NUM_KEYS = 2**KEY_BITS
NUM_BLOCKS = 2**BLOCK_BITS


@dataclass
class KeySearchResult:
    """Outcome of a known-plaintext search over the key space."""
    candidates: List[str] = field(default_factory=list)
    keys_tried: int = 0
    first_hit_rank: Optional[int] = None

    @property
    def found(self) -> bool:
        return bool(self.candidates)


def codebook(sk1: int, sk2: int) -> np.ndarray:
    """
    Encrypt every 8-bit block under one subkey pair.

    Returns:
        uint8 array of length 256 where entry p is encrypt(p, sk1, sk2).
    """
    return np.array([encrypt(p, sk1, sk2) for p in range(NUM_BLOCKS)], dtype=np.uint8)


def is_bijection(table: np.ndarray) -> bool:
    """True when every value in range(len(table)) appears exactly once."""
    table = np.asarray(table)
    counts = np.bincount(table, minlength=len(table))
    return len(counts) == len(table) and bool(np.all(counts == 1))


def key_space_codebooks(progress: bool = False) -> np.ndarray:
    """
    Codebook of every master key, shape (1024, 256): row k, column p holds
    the ciphertext of block p under key k.
    """
    books = np.empty((NUM_KEYS, NUM_BLOCKS), dtype=np.uint8)
    for key in tqdm(range(NUM_KEYS), desc="Building codebooks", disable=not progress):
        books[key] = codebook(*generate_subkeys(key))
    return books


def equivalent_keys() -> Dict[Tuple[int, int], List[int]]:
    """
    Group master keys by the subkey pair they expand to.
    Groups with more than one member are keys that cannot be told apart.
    """
    groups = defaultdict(list)
    for key in range(NUM_KEYS):
        groups[generate_subkeys(key)].append(key)
    return dict(groups)


def search_keys(
    plaintexts: Sequence[str],
    ciphertexts: Sequence[str],
    order: Optional[Iterable[int]] = None,
    progress: bool = False,
) -> KeySearchResult:
    """
    Known-plaintext key search: test master keys in `order` (default
    0..1023) and keep every key that maps all plaintexts to their ciphertexts.

    Args:
        plaintexts: 8-bit strings.
        ciphertexts: 8-bit strings, same length as plaintexts.
        order: permutation of the key space, e.g. from prior.key_ranking.
        progress: show a tqdm bar.

    Returns:
        KeySearchResult with candidates in the order they were found.
    """
    if len(plaintexts) != len(ciphertexts):
        raise ValueError("plaintexts and ciphertexts must have the same length.")
    if not plaintexts:
        raise ValueError("at least one plaintext/ciphertext pair is required.")

    pairs = [
        (from_bitstring(pt, BLOCK_BITS, "plaintext"), from_bitstring(ct, BLOCK_BITS, "ciphertext"))
        for pt, ct in zip(plaintexts, ciphertexts)
    ]
    if order is None:
        order = range(NUM_KEYS)

    result = KeySearchResult()
    for rank, key in enumerate(tqdm(order, total=NUM_KEYS, desc="Searching keys", disable=not progress)):
        key = int(key)
        result.keys_tried = rank + 1
        k1, k2 = generate_subkeys(key)
        if all(encrypt(pt, k1, k2) == ct for pt, ct in pairs):
            if result.first_hit_rank is None:
                result.first_hit_rank = rank
            result.candidates.append(to_bitstring(key, KEY_BITS))
    return result
