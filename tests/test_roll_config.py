"""屏蔽词配置测试"""

from utils.roll_config import DEFAULT_BLOCK_WORDS, load_block_words


class TestLoadBlockWords:
    def test_defaults_when_unset(self, monkeypatch):
        monkeypatch.delenv("ROLL_BLOCK_WORDS", raising=False)
        assert load_block_words() == DEFAULT_BLOCK_WORDS

    def test_defaults_are_copied(self, monkeypatch):
        monkeypatch.delenv("ROLL_BLOCK_WORDS", raising=False)
        words = load_block_words()
        words.append("extra")
        assert "extra" not in DEFAULT_BLOCK_WORDS

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("ROLL_BLOCK_WORDS", "foo, bar")
        assert load_block_words() == ["foo", "bar"]

    def test_empty_env_disables(self, monkeypatch):
        monkeypatch.setenv("ROLL_BLOCK_WORDS", "")
        assert load_block_words() == []

    def test_fullwidth_comma_and_blanks(self):
        assert load_block_words("a，b,, c ,") == ["a", "b", "c"]
