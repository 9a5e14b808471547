"""
Tests for all cipher engines.
"""
import random
import string

import pytest

from cipherkit.core.exceptions import DecodeError, EngineNotFoundError, InvalidKeyError
from cipherkit.models.schemas import CipherFamily, CipherType, Direction, SweepStrategy
from cipherkit.services.engines.encoding.baconian import BaconianEngine
from cipherkit.services.engines.registry import EngineRegistry

PLAINTEXT = "The quick brown fox jumps over the lazy dog, 42 times!"

MESSAGES = [
    PLAINTEXT,
    string.printable,
    "attackatdawn",
    "x",
]


class TestCipherRegistry:
    """Test the cipher registry."""

    def test_all_ciphers_registered(self):
        registered = EngineRegistry.list_registered()
        for cipher_type in CipherType:
            assert cipher_type in registered, f"{cipher_type} not registered"

    def test_get_engines_by_family(self, registry):
        mono = registry.get_engines_by_family(CipherFamily.MONOALPHABETIC)
        poly = registry.get_engines_by_family(CipherFamily.POLYALPHABETIC)
        trans = registry.get_engines_by_family(CipherFamily.TRANSPOSITION)
        encoding = registry.get_engines_by_family(CipherFamily.ENCODING)

        assert len(mono) == 6  # Caesar, ROT13, Atbash, Affine, Polybius, SimpleSubstitution
        assert len(poly) == 3  # Vigenere, Beaufort, Autokey
        assert len(trans) == 2  # RailFence, Columnar
        assert len(encoding) == 2  # Baconian, Base64

    def test_dictionary_strategy_engines(self, registry):
        keyed = {e.cipher_type for e in registry.get_engines_by_strategy(SweepStrategy.DICTIONARY)}
        assert keyed == {
            CipherType.VIGENERE,
            CipherType.BEAUFORT,
            CipherType.AUTOKEY,
            CipherType.SIMPLE_SUBSTITUTION,
            CipherType.COLUMNAR,
        }

    def test_unknown_cipher(self, registry):
        with pytest.raises(EngineNotFoundError):
            registry.get_engine("enigma")

    def test_engine_instances_are_cached(self, registry):
        assert registry.get_engine(CipherType.CAESAR) is EngineRegistry().get_engine(
            CipherType.CAESAR
        )


class TestRoundTrips:
    """decrypt(encrypt(m, k), k) == m for every keyed and keyless cipher."""

    @pytest.mark.parametrize("message", MESSAGES)
    @pytest.mark.parametrize(
        "cipher_type,key",
        [
            (CipherType.CAESAR, 7),
            (CipherType.CAESAR, -200),
            (CipherType.VIGENERE, "lemon"),
            (CipherType.VIGENERE, "p4ss!"),
            (CipherType.VIGENERE, "ALPHA"),
            (CipherType.BEAUFORT, "fortify"),
            (CipherType.BEAUFORT, "p4ss!"),
            (CipherType.AUTOKEY, "queen"),
            (CipherType.AUTOKEY, "p4ss!"),
            (CipherType.AUTOKEY, "averylongprimer"),
            (CipherType.ATBASH, None),
            (CipherType.ROT13, None),
            (CipherType.AFFINE, (5, 8)),
            (CipherType.AFFINE, (25, 0)),
            (CipherType.POLYBIUS, None),
            (CipherType.SIMPLE_SUBSTITUTION, "hunter2"),
            (CipherType.SIMPLE_SUBSTITUTION, "p4ss!"),
            (CipherType.COLUMNAR, "zebras"),
            (CipherType.COLUMNAR, "ALPHA"),
            (CipherType.COLUMNAR, "p4ss!"),
            (CipherType.COLUMNAR, "longerthanthemessage"),
            (CipherType.BASE64, None),
        ],
    )
    def test_round_trip(self, registry, cipher_type, key, message):
        engine = registry.get_engine(cipher_type)
        ciphertext = engine.apply(message, key, Direction.ENCRYPT)
        assert engine.apply(ciphertext, key, Direction.DECRYPT) == message

    @pytest.mark.parametrize("message", MESSAGES)
    def test_rail_fence_round_trip_every_rail_count(self, registry, message):
        rail_fence = registry.get_engine(CipherType.RAIL_FENCE)
        for rails in range(2, len(message) + 1):
            ciphertext = rail_fence.apply(message, rails, Direction.ENCRYPT)
            assert rail_fence.apply(ciphertext, rails, Direction.DECRYPT) == message

    def test_rail_fence_sweep_over_long_message(self, registry):
        rail_fence = registry.get_engine(CipherType.RAIL_FENCE)
        message = (PLAINTEXT + " ") * 22
        ciphertext = rail_fence.encrypt(message, 7)

        decoded = [
            rail_fence.decrypt(ciphertext, rails) for rails in rail_fence.sweep_keys(message)
        ]
        assert len(decoded) == len(message) - 1
        assert decoded[5] == message

    def test_rail_fence_rejects_single_character_message(self, registry):
        rail_fence = registry.get_engine(CipherType.RAIL_FENCE)
        with pytest.raises(InvalidKeyError):
            rail_fence.apply("x", 2, Direction.ENCRYPT)
        assert list(rail_fence.sweep_keys("x")) == []

    @pytest.mark.parametrize("message", MESSAGES)
    def test_baconian_recovers_letters(self, message):
        bacon = BaconianEngine(rng=random.Random(7))
        expected = "".join(
            c.lower() if c in string.ascii_letters else c
            for c in message
            if c in string.ascii_letters or c.isspace()
        )
        assert bacon.decrypt(bacon.encrypt(message)) == expected


class TestMonoalphabeticCiphers:
    def test_caesar_shifts_digits_and_punctuation(self, registry):
        caesar = registry.get_engine(CipherType.CAESAR)
        assert caesar.encrypt("hello world", 5) == "mjqqt |twqi"
        assert caesar.encrypt("09", 1) == "1:"

    def test_caesar_sweep_covers_band(self, registry):
        caesar = registry.get_engine(CipherType.CAESAR)
        assert list(caesar.sweep_keys("x")) == list(range(1, 81))

    def test_rot13_self_reciprocal(self, registry):
        rot13 = registry.get_engine(CipherType.ROT13)
        assert rot13.encrypt("Hello, World!") == "Uryyb, Jbeyq!"
        assert rot13.encrypt(rot13.encrypt(PLAINTEXT)) == PLAINTEXT

    def test_atbash_self_inverse(self, registry):
        atbash = registry.get_engine(CipherType.ATBASH)
        assert atbash.encrypt("abc XYZ") == "zyx CBA"
        assert atbash.encrypt(atbash.encrypt(PLAINTEXT)) == PLAINTEXT

    def test_affine_known_vector(self, registry):
        affine = registry.get_engine(CipherType.AFFINE)
        assert affine.encrypt("hello", (5, 8)) == "rclla"
        assert affine.apply("rclla", "5,8", Direction.DECRYPT) == "hello"
        assert affine.apply("rclla", {"a": 5, "b": 8}, Direction.DECRYPT) == "hello"

    @pytest.mark.parametrize("a", [0, 2, 4, 6, 8, 10, 12, 13, 14, 16, 18, 20, 22, 24, 26])
    def test_affine_rejects_non_coprime(self, registry, a):
        affine = registry.get_engine(CipherType.AFFINE)
        for direction in Direction:
            with pytest.raises(InvalidKeyError) as exc_info:
                affine.apply("hello", (a, 3), direction)
            assert exc_info.value.parameter == "a"

    def test_affine_sweep_only_invertible_keys(self, registry):
        affine = registry.get_engine(CipherType.AFFINE)
        keys = list(affine.sweep_keys("x"))
        assert len(keys) == 12 * 27
        assert all(a % 2 and a != 13 for a, _ in keys)

    def test_polybius_moves_one_row(self, registry):
        polybius = registry.get_engine(CipherType.POLYBIUS)
        assert polybius.encrypt("a u Z z") == "f a Z z"
        assert polybius.decrypt("f") == "a"

    def test_simple_substitution_seed_is_reproducible(self, registry):
        engine = registry.get_engine(CipherType.SIMPLE_SUBSTITUTION)
        alphabet = engine.substitution_alphabet("secret")
        assert alphabet == engine.substitution_alphabet("secret")
        assert sorted(alphabet) == list("abcdefghijklmnopqrstuvwxyz")
        assert engine.encrypt(PLAINTEXT, "secret") == engine.encrypt(PLAINTEXT, "secret")


class TestPolyalphabeticCiphers:
    def test_vigenere_key_case_is_ignored(self, registry):
        vigenere = registry.get_engine(CipherType.VIGENERE)
        assert vigenere.apply(PLAINTEXT, "LEMON", Direction.ENCRYPT) == vigenere.apply(
            PLAINTEXT, "lemon", Direction.ENCRYPT
        )

    def test_vigenere_key_a_is_identity(self, registry):
        vigenere = registry.get_engine(CipherType.VIGENERE)
        assert vigenere.apply(PLAINTEXT, "a", Direction.ENCRYPT) == PLAINTEXT

    def test_beaufort_label_shows_keyword(self, registry):
        beaufort = registry.get_engine(CipherType.BEAUFORT)
        key = beaufort.parse_key("fortify")
        assert beaufort.candidate_label(key) == "Beaufort - fortify"

    @pytest.mark.parametrize("cipher_type", [CipherType.VIGENERE, CipherType.AUTOKEY])
    @pytest.mark.parametrize("bad_key", [None, "", "two words", 42])
    def test_invalid_text_keys(self, registry, cipher_type, bad_key):
        engine = registry.get_engine(cipher_type)
        with pytest.raises(InvalidKeyError):
            engine.apply(PLAINTEXT, bad_key, Direction.ENCRYPT)

    def test_autokey_message_shorter_than_primer(self, registry):
        autokey = registry.get_engine(CipherType.AUTOKEY)
        assert autokey.encrypt("hi", "queen") == "x}"
        assert autokey.decrypt("x}", "queen") == "hi"


class TestTranspositionCiphers:
    def test_rail_fence_worked_example(self, registry):
        rail_fence = registry.get_engine(CipherType.RAIL_FENCE)
        plaintext = "WEAREDISCOVEREDFLEEATONCE"
        ciphertext = "WECRLTEERDSOEEFEAOCAIVDEN"
        assert rail_fence.apply(plaintext, 3, Direction.ENCRYPT) == ciphertext
        assert rail_fence.apply(ciphertext, 3, Direction.DECRYPT) == plaintext

    @pytest.mark.parametrize("rails", [0, 1, 6])
    def test_rail_fence_rail_bounds(self, registry, rails):
        rail_fence = registry.get_engine(CipherType.RAIL_FENCE)
        with pytest.raises(InvalidKeyError):
            rail_fence.apply("hello", rails, Direction.ENCRYPT)

    def test_rail_fence_sweep_range(self, registry):
        rail_fence = registry.get_engine(CipherType.RAIL_FENCE)
        assert list(rail_fence.sweep_keys("hello")) == [2, 3, 4, 5]

    def test_columnar_duplicate_letters_read_left_to_right(self, registry):
        columnar = registry.get_engine(CipherType.COLUMNAR)
        assert columnar.column_order("ALPHA") == [0, 4, 3, 1, 2]

    def test_columnar_known_vector(self, registry):
        columnar = registry.get_engine(CipherType.COLUMNAR)
        # Columns of "abc" over "helloworld": hlod / eor / lwl
        assert columnar.encrypt("helloworld", "cab") == "eorlwlhlod"
        assert columnar.decrypt("eorlwlhlod", "cab") == "helloworld"

    def test_columnar_ragged_grid_with_repeated_letters(self, registry):
        columnar = registry.get_engine(CipherType.COLUMNAR)
        # 11 characters over 5 columns: column 0 holds three, the rest two
        assert columnar.encrypt("helloworld!", "ALPHA") == "hw!odlleolr"
        assert columnar.decrypt("hw!odlleolr", "ALPHA") == "helloworld!"


class TestEncodings:
    def test_baconian_decode(self, registry):
        bacon = registry.get_engine(CipherType.BACONIAN)
        assert bacon.decrypt("00000 00001") == "a b"
        assert bacon.decrypt("0000000001\n00010") == "ab\nc"

    def test_baconian_threshold(self, registry):
        bacon = registry.get_engine(CipherType.BACONIAN)
        # 0b00111 = 7 -> 'h'; any digit 7-9 is a one bit
        assert bacon.decrypt("00789") == "h"
        assert bacon.decrypt("65478") == "d"

    def test_baconian_round_trip_lowercases_and_drops_symbols(self):
        bacon = BaconianEngine(rng=random.Random(1))
        ciphertext = bacon.encrypt("Hi there, 42!")
        assert set(ciphertext) <= set("0123456789 ")
        assert bacon.decrypt(ciphertext) == "hi there "

    @pytest.mark.parametrize("ciphertext", ["hello", "0000", "99999", "00000-00000"])
    def test_baconian_rejects_malformed_input(self, registry, ciphertext):
        bacon = registry.get_engine(CipherType.BACONIAN)
        with pytest.raises(DecodeError):
            bacon.decrypt(ciphertext)

    def test_base64(self, registry):
        b64 = registry.get_engine(CipherType.BASE64)
        assert b64.encrypt("hello") == "aGVsbG8="
        assert b64.decrypt("aGVs bG8=") == "hello"

    @pytest.mark.parametrize("ciphertext", ["!!!", "aGVsbG8", "/w=="])
    def test_base64_rejects_malformed_input(self, registry, ciphertext):
        b64 = registry.get_engine(CipherType.BASE64)
        with pytest.raises(DecodeError):
            b64.decrypt(ciphertext)
