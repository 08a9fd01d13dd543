# config.py
import os



# ─── Demo ─────────────────────────────────────────────────────────────────────
# Master key and plaintext block printed by `sdes-demo` (binary strings).
DEMO_MASTER_KEY = "1010000010"
DEMO_PLAINTEXT = "11010111"


# ─── Key Search: Problem Definition ───────────────────────────────────────────

# How many random plaintext/ciphertext pairs should we generate?
# (if you want to supply your own pairs, set USE_CUSTOM_PAIRS = True below)
SEARCH_NUM_PLAINTEXTS = 3
SEARCH_USE_CUSTOM_PAIRS = False

# If USE_CUSTOM_PAIRS=True, load from a JSON file (e.g. data/example_keys.json)
# with keys "true_key", "plaintexts" and "ciphertexts".
# Otherwise we randomly sample a key and plaintexts and encrypt them here.
SEARCH_CUSTOM_PAIRS_FILE = "data/example_keys.json"


# ─── Gaussian Prior ───────────────────────────────────────────────────────────

# If None, we center the Gaussian prior on the true key.
# Otherwise set this to a 10-bit string to center on a guess.
SEARCH_PRIOR_CENTER_KEY = "0110010100"
SEARCH_PRIOR_STD_DEV = 2  # Standard deviation for Gaussian prior (how "wide" it is)

SEARCH_SHOW_PROGRESS = True


# ─── Misc ─────────────────────────────────────────────────────────────────────

# If you want to fix numpy’s RNG (for total determinism), set this to an int.
GLOBAL_RANDOM_SEED = 12345

RESULTS_DIR = os.getenv("SDES_RESULTS_DIR", ".")
SEARCH_RESULTS_FILE = os.path.join(RESULTS_DIR, "key_search_results.json")
