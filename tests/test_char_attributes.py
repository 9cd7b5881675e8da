import pytest

from spellcheck_segmenter.char_attributes import BoundaryRules, BoundaryRulesError


@pytest.mark.parametrize(
    ("language", "script"),
    [
        ("en-US", "Latin"),
        ("ru", "Cyrillic"),
        ("he-IL", "Hebrew"),
        ("ko_KR", "Hangul"),
        ("sr-Latn-RS", "Latin"),
        ("sr-Cyrl", "Cyrillic"),
        ("xx", "Latin"),
    ],
)
def test_language_resolves_to_script(language: str, script: str):
    assert BoundaryRules(language).script == script


def test_unparsable_language_cannot_build_pattern():
    rules = BoundaryRules("")
    assert rules.script is None
    with pytest.raises(BoundaryRulesError):
        rules.compile_pattern(True)
    with pytest.raises(BoundaryRulesError):
        BoundaryRules("42").compile_pattern(False)


def test_set_default_language_switches_script():
    rules = BoundaryRules("en-US")
    rules.set_default_language("el-GR")
    assert rules.language == "el-GR"
    assert rules.script == "Greek"


def test_mid_letters_include_language_and_configured_extras():
    assert ":" in BoundaryRules("en").mid_letters
    assert "'" in BoundaryRules("en").mid_letters
    assert '"' not in BoundaryRules("en").mid_letters
    assert '"' in BoundaryRules("he").mid_letters
    assert BoundaryRules("en", extra_mid_letters="+").mid_letters.endswith("+")


def test_lenient_pattern_keeps_contractions_whole():
    pattern = BoundaryRules("en-US").compile_pattern(allow_contraction=True)
    words = [m.group() for m in pattern.finditer("in'n'out hello:hello") if m.lastgroup == "word"]
    assert words == ["in'n'out", "hello:hello"]


def test_strict_pattern_splits_on_mid_letters():
    pattern = BoundaryRules("en-US").compile_pattern(allow_contraction=False)
    words = [m.group() for m in pattern.finditer("in'n'out hello:hello") if m.lastgroup == "word"]
    assert words == ["in", "n", "out", "hello", "hello"]


def test_patterns_cover_every_character():
    text = " -- it's, (well-known) e.g. 42! "
    pattern = BoundaryRules("en-US").compile_pattern(allow_contraction=True)
    assert "".join(m.group() for m in pattern.finditer(text)) == text


def test_normalize_word_applies_nfkc_and_drops_foreign_script():
    rules = BoundaryRules("en-US")
    assert rules.normalize_word("\ufb01ne") == "fine"
    assert rules.normalize_word("hello\u043c\u0438\u0440") == "hello"
    assert rules.normalize_word("\u043c\u0438\u0440") == ""


def test_normalize_word_drops_hebrew_niqqud():
    rules = BoundaryRules("he")
    shalom = "\u05e9\u05b8\u05c1\u05dc\u05d5\u05b9\u05dd"
    assert rules.normalize_word(shalom) == "\u05e9\u05dc\u05d5\u05dd"


def test_normalize_word_drops_arabic_tashkeel():
    rules = BoundaryRules("ar")
    assert rules.normalize_word("\u0643\u064e\u062a\u064e\u0628\u064e") == "\u0643\u062a\u0628"


def test_normalize_word_decomposes_hangul():
    rules = BoundaryRules("ko")
    assert rules.normalize_word("\ud55c") == "\u1112\u1161\u11ab"


def test_is_numeric():
    rules = BoundaryRules("en-US")
    assert rules.is_numeric("123")
    assert rules.is_numeric("1_000")
    assert not rules.is_numeric("abc1")
