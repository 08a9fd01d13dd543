import numpy as np
from collections import Counter
from src.sdes import sdes_encrypt


def to_jsonable(obj):
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    if isinstance(obj, (np.float32, np.float64)):
        return float(obj)
    if isinstance(obj, (np.int32, np.int64)):
        return int(obj)
    if isinstance(obj, dict):
        return {k: to_jsonable(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [to_jsonable(x) for x in obj]
    return obj

def hamming_distance(a: str, b: str) -> int:
    """
    Compute the Hamming distance between two bit strings of equal length.
    Args:
        a: First bit string (e.g., '0101')
        b: Second bit string (e.g., '1101')
    Returns:
        Number of positions at which the corresponding bits are different.
    """
    if len(a) != len(b):
        raise ValueError("Bit strings must be of equal length.")
    return sum(x != y for x, y in zip(a, b))

def get_int_from_binary(bit_list):
    """
    Convert a list of bits (0/1) to an integer.
    Example: [1,0,1] → 5.
    """
    return int("".join(str(b) for b in bit_list), 2)

def int_to_bit_array(value: int, n_bits: int) -> np.ndarray:
    """
    Unpack an integer into a length-n_bits array of 0/1, MSB first.
    Example: (5, 4) → [0, 1, 0, 1].
    """
    shifts = np.arange(n_bits - 1, -1, -1)
    return (value >> shifts) & 1

def random_bitstring(length: int) -> str:
    """
    Return a random bitstring of given length (characters '0' or '1').
    """
    return "".join(np.random.choice(['0', '1'], size=length))

def random_10bit_string() -> str:
    """Return a random 10-bit string."""
    return random_bitstring(10)

def random_8bit_string() -> str:
    """Return a random 8-bit string."""
    return random_bitstring(8)

def encrypt_counts_keys(counts: dict, plaintext: str) -> Counter:
    """
    Given a counts dictionary mapping 10-bit key strings → frequencies,
    run sdes_encrypt(plaintext, key_str) to obtain ciphertext (8-bit),
    then tally frequencies of those ciphertexts.

    Args:
        counts: dict { '0101010101': freq, ... } representing key → freq
        plaintext: 8-bit string used to encrypt with each key_str

    Returns:
        Counter { 'ciphertext8': aggregated_freq, ... }
    """
    result = Counter()
    for key_str, freq in counts.items():
        cipher = sdes_encrypt(plaintext, key_str)
        result[cipher] += freq
    return result
