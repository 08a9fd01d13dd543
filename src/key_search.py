import json
import time
import numpy as np

from src.sdes import sdes_encrypt
from src.prior import key_ranking
from src.analysis import search_keys
from src.utils import random_10bit_string, random_8bit_string, hamming_distance, to_jsonable
import config


def load_pairs():
    """
    Return (true_key, plaintexts, ciphertexts), either from the custom
    pairs file or freshly sampled with numpy's RNG.
    """
    if config.SEARCH_USE_CUSTOM_PAIRS:
        with open(config.SEARCH_CUSTOM_PAIRS_FILE, "r") as f:
            pairs = json.load(f)
        return pairs["true_key"], pairs["plaintexts"], pairs["ciphertexts"]

    true_key = random_10bit_string()
    plaintexts = [random_8bit_string() for _ in range(config.SEARCH_NUM_PLAINTEXTS)]
    ciphertexts = [sdes_encrypt(pt, true_key) for pt in plaintexts]
    return true_key, plaintexts, ciphertexts


def main():
    start_time = time.time()

    # ─── 1. Optionally fix RNG for reproducibility ─────────────────────────────────
    if config.GLOBAL_RANDOM_SEED is not None:
        np.random.seed(config.GLOBAL_RANDOM_SEED)

    # ─── 2. Decide whether to load custom pairs from JSON or generate randomly ──
    true_key, plaintexts, ciphertexts = load_pairs()
    print(f"True key:       {true_key}")

    # ─── 3. Build Gaussian prior (centered on either a guess or actual key) ──────
    if config.SEARCH_PRIOR_CENTER_KEY is None:
        center_key_str = true_key
    else:
        center_key_str = config.SEARCH_PRIOR_CENTER_KEY
    order = key_ranking(center_key_str, config.SEARCH_PRIOR_STD_DEV)

    # ─── 4. Search the key space in prior order ───────────────────────────────────
    print("Searching key space in order of prior probability...")
    result = search_keys(plaintexts, ciphertexts, order=order, progress=config.SEARCH_SHOW_PROGRESS)

    elapsed_time = time.time() - start_time
    if result.found:
        print(f"Candidate keys: {result.candidates}")
        print(f"First candidate found after {result.first_hit_rank + 1} keys")
    else:
        print("No key is consistent with the given pairs")
    print(f"Total execution time: {elapsed_time:.2f} seconds")

    # ─── 5. Save results to JSON ─────────────────────────────────────────────────
    output = {
        "true_key": true_key,
        "prior_center_key": center_key_str,
        "prior_hamming_distance": hamming_distance(true_key, center_key_str),
        "prior_std_dev": config.SEARCH_PRIOR_STD_DEV,
        "num_pairs": len(plaintexts),
        "candidates": result.candidates,
        "true_key_recovered": true_key in result.candidates,
        "first_hit_rank": result.first_hit_rank,
        "execution_time": f"{elapsed_time:.4f} seconds",
    }
    with open(config.SEARCH_RESULTS_FILE, "a") as f:
        json.dump(to_jsonable(output), f, indent=2)

    print(f"Results saved to {config.SEARCH_RESULTS_FILE}")
    return output


if __name__ == "__main__":
    main()
