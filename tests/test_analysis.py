import numpy as np
import pytest
from src.analysis import (
    codebook,
    equivalent_keys,
    is_bijection,
    key_space_codebooks,
    search_keys,
)
from src.prior import key_ranking
from src.sdes import generate_subkeys, sdes_encrypt


def test_codebook_matches_known_vector_and_is_bijection():
    book = codebook(*generate_subkeys(0b1010000010))
    assert book.shape == (256,)
    assert book[0b11010111] == 0b10101000
    assert is_bijection(book)


def test_is_bijection_detects_collisions():
    assert is_bijection(np.arange(8)[::-1])
    assert not is_bijection(np.array([0, 1, 1, 3]))
    assert not is_bijection(np.array([0, 1, 2, 7]))


def test_key_space_codebooks_every_row_is_permutation():
    books = key_space_codebooks()
    assert books.shape == (1024, 256)
    assert books[0b1010000010, 0b11010111] == 0b10101000
    for row in books:
        assert is_bijection(row)


def test_equivalent_keys_partition_key_space():
    groups = equivalent_keys()
    members = sorted(k for keys in groups.values() for k in keys)
    assert members == list(range(1024))
    assert 0b1010000010 in groups[(0b10100100, 0b01000011)]


def test_search_keys_recovers_true_key():
    key = "1010000010"
    plaintexts = ["11010111", "00000000", "11111111", "01010101"]
    ciphertexts = [sdes_encrypt(pt, key) for pt in plaintexts]
    result = search_keys(plaintexts, ciphertexts)
    assert result.found
    assert key in result.candidates
    assert result.keys_tried == 1024


def test_search_keys_prior_order_hits_center_first():
    key = "0110010100"
    plaintexts = ["11010111", "00110011"]
    ciphertexts = [sdes_encrypt(pt, key) for pt in plaintexts]
    result = search_keys(plaintexts, ciphertexts, order=key_ranking(key, 2.0))
    assert result.first_hit_rank == 0
    assert result.candidates[0] == key


def test_search_keys_no_candidate():
    # Two distinct plaintexts never share a ciphertext under one key
    plaintexts = ["00000000", "00000001"]
    ciphertexts = ["10101010", "10101010"]
    result = search_keys(plaintexts, ciphertexts)
    assert not result.found
    assert result.first_hit_rank is None


def test_search_keys_rejects_mismatched_pairs():
    with pytest.raises(ValueError):
        search_keys(["00000000"], [])
    with pytest.raises(ValueError):
        search_keys([], [])
    with pytest.raises(ValueError):
        search_keys(["0000000"], ["00000000"])
