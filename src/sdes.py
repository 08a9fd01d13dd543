from typing import Sequence, Tuple

# Permutation tables (1-based indexing, counted from the most significant bit)
P10    = (3, 5, 2, 7, 4, 10, 1, 9, 8, 6)
P8     = (6, 3, 7, 4, 8, 5, 10, 9)
IP     = (2, 6, 3, 1, 4, 8, 5, 7)
IP_INV = (4, 1, 3, 5, 7, 2, 8, 6)
EP     = (4, 1, 2, 3, 2, 3, 4, 1)
P4     = (2, 4, 3, 1)

S0 = (
    (1, 0, 3, 2),
    (3, 2, 1, 0),
    (0, 2, 1, 3),
    (3, 1, 3, 2)
)

S1 = (
    (0, 1, 2, 3),
    (2, 0, 1, 3),
    (3, 0, 1, 0),
    (2, 1, 0, 3)
)

KEY_BITS = 10
BLOCK_BITS = 8
HALF_KEY_BITS = 5
NIBBLE_BITS = 4


def _mask(width: int) -> int:
    return (1 << width) - 1


def permute(value: int, table: Sequence[int], width: int) -> int:
    """
    Apply a permutation table (1-based indices) to a `width`-bit input.

    Output bit i (counted from the MSB) is the input bit at position table[i].
    The result is len(table) bits wide; entries may repeat.
    """
    value &= _mask(width)
    out_width = len(table)
    result = 0
    for i, pos in enumerate(table):
        bit = (value >> (width - pos)) & 1
        result |= bit << (out_width - 1 - i)
    return result


def p10(key: int) -> int:
    return permute(key, P10, KEY_BITS)


def p8(key: int) -> int:
    """Select and reorder 8 of the 10 key bits."""
    return permute(key, P8, KEY_BITS)


def initial_permutation(block: int) -> int:
    return permute(block, IP, BLOCK_BITS)


def inverse_initial_permutation(block: int) -> int:
    return permute(block, IP_INV, BLOCK_BITS)


def expansion_permutation(nibble: int) -> int:
    """
    Widen a 4-bit value to 8 bits. Every source bit is read twice,
    so this is not a bijection onto the 8-bit space.
    """
    return permute(nibble, EP, NIBBLE_BITS)


def p4(nibble: int) -> int:
    return permute(nibble, P4, NIBBLE_BITS)


def rotate_left(half: int, n: int, width: int = HALF_KEY_BITS) -> int:
    """
    Circular left shift of a `width`-bit value by n positions (0 < n < width).
    """
    mask = _mask(width)
    half &= mask
    return ((half << n) | (half >> (width - n))) & mask


def left_shift(key: int, n: int) -> int:
    """
    Rotate the high and low 5-bit halves of a 10-bit value independently.
    """
    left = (key >> HALF_KEY_BITS) & _mask(HALF_KEY_BITS)
    right = key & _mask(HALF_KEY_BITS)
    return (rotate_left(left, n) << HALF_KEY_BITS) | rotate_left(right, n)


def generate_subkeys(master_key: int) -> Tuple[int, int]:
    """
    Given a 10-bit key, generate the two 8-bit subkeys (K1, K2).
    """
    # Apply P10 permutation
    permuted = p10(master_key)
    # Left shift each half by 1, K1 via P8
    ls1 = left_shift(permuted, 1)
    k1 = p8(ls1)
    # Left shift each half of the result by 2, K2 via P8
    ls2 = left_shift(ls1, 2)
    k2 = p8(ls2)
    return k1, k2


def sbox_lookup(nibble: int, sbox: Sequence[Sequence[int]]) -> int:
    """
    nibble: 4-bit value.
    sbox: 4×4 table.
    Row comes from the outer bits (3 and 0), column from the inner bits (2 and 1).
    Returns the 2-bit S-box output.
    """
    row = ((nibble >> 2) & 0b10) | (nibble & 1)
    col = (nibble >> 1) & 0b11
    return sbox[row][col]


def f_function(nibble: int, subkey: int) -> int:
    """
    Round function F: maps the right half and a subkey to a 4-bit mask.
    """
    # Expand and permute right half, XOR with subkey
    xored = expansion_permutation(nibble) ^ (subkey & _mask(BLOCK_BITS))
    # Split into two 4-bit halves and apply S-boxes
    s0_out = sbox_lookup((xored >> NIBBLE_BITS) & _mask(NIBBLE_BITS), S0)
    s1_out = sbox_lookup(xored & _mask(NIBBLE_BITS), S1)
    # Combine and apply P4
    return p4((s0_out << 2) | s1_out)


def fk(block: int, subkey: int) -> int:
    """
    One Feistel mix: XOR F(right, subkey) into the left half.
    The right half passes through unchanged.
    """
    left = (block >> NIBBLE_BITS) & _mask(NIBBLE_BITS)
    right = block & _mask(NIBBLE_BITS)
    new_left = left ^ f_function(right, subkey)
    return (new_left << NIBBLE_BITS) | right


def switch(block: int) -> int:
    """Swap the high and low nibbles of an 8-bit block."""
    return ((block & 0x0F) << NIBBLE_BITS) | ((block >> NIBBLE_BITS) & 0x0F)


def _rounds(block: int, first: int, second: int) -> int:
    state = initial_permutation(block)
    state = fk(state, first)
    state = switch(state)
    state = fk(state, second)
    return inverse_initial_permutation(state)


def encrypt(block: int, sk1: int, sk2: int) -> int:
    """Encrypt an 8-bit block with the subkey pair (K1, K2)."""
    return _rounds(block, sk1, sk2)


def decrypt(block: int, sk1: int, sk2: int) -> int:
    """Decrypt an 8-bit block; identical to encrypt with K2 applied first."""
    return _rounds(block, sk2, sk1)


def to_bitstring(value: int, width: int) -> str:
    """Render the low `width` bits of value as a '0'/'1' string."""
    return format(value & _mask(width), f"0{width}b")


def from_bitstring(bits: str, width: int, name: str = "bits") -> int:
    """
    Parse a '0'/'1' string of exactly `width` characters into an integer.
    """
    if len(bits) != width or set(bits) - {"0", "1"}:
        raise ValueError(f"{name} must be a {width}-bit string of '0'/'1'.")
    return int(bits, 2)


def sdes_encrypt(plaintext: str, key: str) -> str:
    """
    Encrypt an 8-bit plaintext with a 10-bit key using S-DES.
    Returns the 8-bit ciphertext.
    """
    block = from_bitstring(plaintext, BLOCK_BITS, "plaintext")
    k1, k2 = generate_subkeys(from_bitstring(key, KEY_BITS, "key"))
    return to_bitstring(encrypt(block, k1, k2), BLOCK_BITS)


def sdes_decrypt(ciphertext: str, key: str) -> str:
    """
    Decrypt an 8-bit ciphertext with a 10-bit key using S-DES.
    Returns the 8-bit plaintext.
    """
    block = from_bitstring(ciphertext, BLOCK_BITS, "ciphertext")
    k1, k2 = generate_subkeys(from_bitstring(key, KEY_BITS, "key"))
    return to_bitstring(decrypt(block, k1, k2), BLOCK_BITS)
