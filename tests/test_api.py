"""
Tests for the HTTP API.
"""
import pytest
from fastapi.testclient import TestClient

from cipherkit.core.config import get_settings
from cipherkit.main import app

PREFIX = "/api/v1"


@pytest.fixture
def client(settings):
    app.dependency_overrides[get_settings] = lambda: settings
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestCipherEndpoints:
    def test_list_ciphers(self, client):
        response = client.get(f"{PREFIX}/ciphers")
        assert response.status_code == 200
        assert len(response.json()) == 13

    def test_describe_cipher(self, client):
        response = client.get(f"{PREFIX}/ciphers/railfence")
        assert response.status_code == 200
        assert response.json()["family"] == "transposition"

    def test_unknown_cipher(self, client):
        response = client.get(f"{PREFIX}/ciphers/enigma")
        assert response.status_code == 404
        assert response.json()["detail"]["error"] == "EngineNotFoundError"

    def test_encrypt(self, client):
        response = client.post(
            f"{PREFIX}/encrypt",
            json={"plaintext": "hello world", "cipher_type": "caesar", "key": 5},
        )
        assert response.status_code == 200
        body = response.json()
        assert body["text"] == "mjqqt |twqi"
        assert body["direction"] == "encrypt"

    def test_decrypt(self, client):
        response = client.post(
            f"{PREFIX}/decrypt",
            json={"ciphertext": "rclla", "cipher_type": "affine", "key": "5,8"},
        )
        assert response.status_code == 200
        assert response.json()["text"] == "hello"

    def test_missing_key(self, client):
        response = client.post(
            f"{PREFIX}/decrypt",
            json={"ciphertext": "hello", "cipher_type": "vigenere"},
        )
        assert response.status_code == 400
        assert response.json()["detail"]["details"]["parameter"] == "key"

    def test_non_invertible_affine_key(self, client):
        response = client.post(
            f"{PREFIX}/encrypt",
            json={"plaintext": "hello", "cipher_type": "affine", "key": [4, 3]},
        )
        assert response.status_code == 400

    def test_malformed_ciphertext(self, client):
        response = client.post(
            f"{PREFIX}/decrypt",
            json={"ciphertext": "not digits", "cipher_type": "baconian"},
        )
        assert response.status_code == 422
        assert response.json()["detail"]["error"] == "DecodeError"

    def test_message_too_long(self, client, settings):
        settings.max_message_length = 4
        response = client.post(
            f"{PREFIX}/encrypt",
            json={"plaintext": "hello", "cipher_type": "rot13"},
        )
        assert response.status_code == 400


class TestScoreEndpoint:
    def test_score(self, client):
        response = client.post(f"{PREFIX}/score", json={"message": "the cat sat on the mat"})
        assert response.status_code == 200
        assert response.json()["score"] > 0
        assert set(response.json()) == {"score"}

    def test_letter_free_message_scores_null(self, client):
        response = client.post(f"{PREFIX}/score", json={"message": "1234 !?"})
        assert response.status_code == 200
        assert response.json()["score"] is None

    def test_missing_wordlist(self, client, settings, tmp_path):
        settings.wordlist_path = tmp_path / "missing.txt"
        response = client.post(f"{PREFIX}/score", json={"message": "hello"})
        assert response.status_code == 503


class TestBruteforceEndpoint:
    def test_bounded_bruteforce(self, client):
        response = client.post(
            f"{PREFIX}/bruteforce",
            json={"ciphertext": "uryyb jbeyq", "cipher_types": ["rot13", "caesar"]},
        )
        assert response.status_code == 200
        body = response.json()
        assert body["top_candidates"][0]["text"] == "hello world"
        assert [s["status"] for s in body["sweeps"]] == ["completed", "completed"]
        assert body["report"].startswith("\nFinished!")

    def test_missing_dictionary_is_reported(self, client):
        response = client.post(
            f"{PREFIX}/bruteforce",
            json={
                "ciphertext": "uryyb",
                "cipher_types": ["rot13", "vigenere"],
                "bruteforce_percentage": 1,
            },
        )
        assert response.status_code == 200
        body = response.json()
        assert body["sweeps"][1]["status"] == "failed"
        assert body["warnings"]

    def test_write_results(self, client, settings):
        response = client.post(
            f"{PREFIX}/bruteforce",
            json={"ciphertext": "uryyb", "cipher_types": ["rot13"], "write_results": True},
        )
        assert response.status_code == 200
        assert "[ROT13]" in settings.results_path.read_text(encoding="utf-8")

    def test_requires_cipher_types(self, client):
        response = client.post(
            f"{PREFIX}/bruteforce", json={"ciphertext": "abc", "cipher_types": []}
        )
        assert response.status_code == 422
