import json

import config
from src import key_search
from src.main import main, run_demo


def test_run_demo_known_vector():
    values = run_demo("1010000010", "11010111")
    assert values == {
        "key": "1010000010",
        "plaintext": "11010111",
        "k1": "10100100",
        "k2": "01000011",
        "ciphertext": "10101000",
        "decrypted": "11010111",
    }


def test_main_prints_values(capsys):
    main()
    out = capsys.readouterr().out
    assert "Subkey K1 (8 bits):     10100100" in out
    assert "Encrypted (8 bits):     10101000" in out
    assert "Decrypted (8 bits):     11010111" in out


def test_key_search_centered_on_true_key(tmp_path, monkeypatch):
    results_file = tmp_path / "results.json"
    monkeypatch.setattr(config, "SEARCH_RESULTS_FILE", str(results_file))
    monkeypatch.setattr(config, "SEARCH_PRIOR_CENTER_KEY", None)
    monkeypatch.setattr(config, "SEARCH_SHOW_PROGRESS", False)
    monkeypatch.setattr(config, "SEARCH_USE_CUSTOM_PAIRS", False)

    output = key_search.main()
    assert output["true_key_recovered"]
    assert output["first_hit_rank"] == 0
    assert output["prior_hamming_distance"] == 0
    assert json.loads(results_file.read_text())["true_key"] == output["true_key"]


def test_key_search_custom_pairs(tmp_path, monkeypatch):
    pairs_file = tmp_path / "pairs.json"
    pairs_file.write_text(json.dumps({
        "true_key": "1010000010",
        "plaintexts": ["11010111"],
        "ciphertexts": ["10101000"],
    }))
    monkeypatch.setattr(config, "SEARCH_USE_CUSTOM_PAIRS", True)
    monkeypatch.setattr(config, "SEARCH_CUSTOM_PAIRS_FILE", str(pairs_file))
    monkeypatch.setattr(config, "SEARCH_RESULTS_FILE", str(tmp_path / "results.json"))
    monkeypatch.setattr(config, "SEARCH_PRIOR_CENTER_KEY", "0000000000")
    monkeypatch.setattr(config, "SEARCH_SHOW_PROGRESS", False)

    output = key_search.main()
    assert output["true_key_recovered"]
    assert output["num_pairs"] == 1
    assert output["prior_hamming_distance"] == 3
