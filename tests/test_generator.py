import string
import pytest

from credvault import config, generate_password
from credvault.generator import SecretGenerator


@pytest.fixture
def generator():
    return SecretGenerator()


class TestCharset:

    def test_has_90_distinct_characters(self):
        assert len(SecretGenerator.CHARSET) == 90
        assert len(set(SecretGenerator.CHARSET)) == 90

    def test_spans_all_classes(self):
        charset = set(SecretGenerator.CHARSET)
        assert set(string.ascii_uppercase) <= charset
        assert set(string.ascii_lowercase) <= charset
        assert set(string.digits) <= charset
        assert set("!@#$%^&*~()-_=+[]{}|;:,.<>?/") <= charset

    def test_excludes_whitespace_and_quotes(self):
        assert not set(" \t\n'\"\\`") & set(SecretGenerator.CHARSET)


class TestGenerate:

    @pytest.mark.parametrize("length", [1, 8, 16, 64, 1000])
    def test_exact_length_from_charset(self, generator, length):
        password = generator.generate(length)
        assert len(password) == length
        assert set(password) <= set(config.PASSWORD_CHARSET)

    def test_zero_length_is_empty(self, generator):
        assert generator.generate(0) == ""

    def test_successive_calls_differ(self, generator):
        assert generator.generate(16) != generator.generate(16)

    def test_draws_cover_charset(self, generator):
        # 9000 draws over 90 symbols: missing any one has probability ~ 90 * e^-100.
        assert set(generator.generate(9000)) == set(config.PASSWORD_CHARSET)

    @pytest.mark.parametrize("length", [-1, 1.5, "8", None, True])
    def test_rejects_invalid_length(self, generator, length):
        with pytest.raises(ValueError):
            generator.generate(length)


class TestGeneratePasswordHelper:

    def test_default_length(self):
        assert len(generate_password()) == config.PASSWORD_GENERATOR_DEFAULT_LENGTH == 16

    def test_explicit_length(self):
        assert len(generate_password(32)) == 32
