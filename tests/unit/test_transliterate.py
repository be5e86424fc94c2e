from slug_cli.core.transliterate import UnidecodeTransliterator


def test_ascii_passes_through_unchanged() -> None:
    transliterate = UnidecodeTransliterator()
    assert transliterate("Hello, World!") == "Hello, World!"
    assert transliterate("") == ""


def test_latin_diacritics_and_ligatures() -> None:
    transliterate = UnidecodeTransliterator()
    assert transliterate("Æúű") == "AEuu"
    assert transliterate("méméméoo") == "mememeoo"


def test_han_characters_become_pinyin() -> None:
    result = UnidecodeTransliterator()("影師嗎")
    assert result.split() == ["Ying", "Shi", "Ma"]


def test_output_is_ascii() -> None:
    result = UnidecodeTransliterator()("Компьютер ✓ ß 東京")
    assert result.isascii()


def test_unmapped_code_points_are_dropped() -> None:
    assert UnidecodeTransliterator()("a\U000f0000b") == "ab"


def test_overrides_take_precedence() -> None:
    transliterate = UnidecodeTransliterator(overrides={"&": " and ", "ä": "ae"})
    assert transliterate("Käse & Brot").split() == ["Kaese", "and", "Brot"]
