import numpy as np
from scipy.stats import norm

from src.utils import int_to_bit_array


def _all_keys(n_bits: int) -> np.ndarray:
    # Row i holds the bits of key i, MSB first
    return np.array([int_to_bit_array(i, n_bits) for i in range(2**n_bits)])


def gaussian_prior(n_bits: int, center_key: np.ndarray, std_dev: float) -> np.ndarray:
    """
    Construct a normalized Gaussian prior over all 2^n_bits possible keys,
    where distance is measured by Hamming distance to center_key.

    Args:
        n_bits: Number of bits in the key (e.g., 10).
        center_key: A length-n_bits numpy array of 0s and 1s indicating the center of the prior.
        std_dev: Standard deviation for the Gaussian on Hamming distance.

    Returns:
        A length-(2^n_bits) numpy array of probabilities summing to 1,
        indexed by the integer value of the key.
    """
    center_key = np.asarray(center_key)
    if center_key.shape != (n_bits,):
        raise ValueError("center_key must have exactly n_bits entries.")
    if std_dev <= 0:
        raise ValueError("std_dev must be positive.")
    all_keys = _all_keys(n_bits)
    # Compute Hamming distance to center_key for each key
    hamming_dist = np.sum(all_keys != center_key, axis=1)
    # Evaluate Gaussian PDF at those distances (mean=0)
    probs = norm.pdf(hamming_dist, 0, std_dev)
    # Normalize into a probability distribution
    return probs / np.sum(probs)


def key_ranking(center_key: str, std_dev: float) -> np.ndarray:
    """
    Order every key of len(center_key) bits by descending prior probability.

    Keys at equal Hamming distance keep ascending numeric order, so the
    center key always comes first.
    """
    n_bits = len(center_key)
    center = np.array([int(b) for b in center_key])
    prior = gaussian_prior(n_bits, center, std_dev)
    return np.argsort(-prior, kind="stable")
