from src.sdes import (
    BLOCK_BITS,
    KEY_BITS,
    decrypt,
    encrypt,
    from_bitstring,
    generate_subkeys,
    to_bitstring,
)
import config

BANNER = r"""
 $$$$$$\         $$$$$$$\  $$$$$$$$\  $$$$$$\
$$  __$$\        $$  __$$\ $$  _____|$$  __$$\
$$ /  \__|       $$ |  $$ |$$ |      $$ /  \__|
\$$$$$$\ $$$$$$\ $$ |  $$ |$$$$$\    \$$$$$$\
 \____$$\______|$$ |  $$ |$$  __|    \____$$\
$$\   $$ |       $$ |  $$ |$$ |      $$\   $$ |
\$$$$$$  |       $$$$$$$  |$$$$$$$$\ \$$$$$$  |
 \______/        \_______/ \________| \______/
"""


def run_demo(key_str: str, plaintext_str: str) -> dict:
    """
    Run key schedule, encryption and decryption once.
    Returns every intermediate value as a binary string.
    """
    key = from_bitstring(key_str, KEY_BITS, "key")
    plaintext = from_bitstring(plaintext_str, BLOCK_BITS, "plaintext")

    k1, k2 = generate_subkeys(key)
    ciphertext = encrypt(plaintext, k1, k2)
    decrypted = decrypt(ciphertext, k1, k2)

    return {
        "key": to_bitstring(key, KEY_BITS),
        "plaintext": to_bitstring(plaintext, BLOCK_BITS),
        "k1": to_bitstring(k1, BLOCK_BITS),
        "k2": to_bitstring(k2, BLOCK_BITS),
        "ciphertext": to_bitstring(ciphertext, BLOCK_BITS),
        "decrypted": to_bitstring(decrypted, BLOCK_BITS),
    }


def main():
    print(BANNER)
    values = run_demo(config.DEMO_MASTER_KEY, config.DEMO_PLAINTEXT)

    print(f"Original Key (10 bits): {values['key']}")
    print(f"Original Data (8 bits): {values['plaintext']}")
    print(f"Subkey K1 (8 bits):     {values['k1']}")
    print(f"Subkey K2 (8 bits):     {values['k2']}")
    print(f"Encrypted (8 bits):     {values['ciphertext']}")
    print(f"Decrypted (8 bits):     {values['decrypted']}")


if __name__ == "__main__":
    main()
