import pytest
import Stemmer
from rustem import Tokenizer, InvalidTextError, get_word_base, normalize_text


@pytest.fixture
def tokenizer():
    return Tokenizer()


def test_normalize_text():
    text = "г. Москва, ул. Полярная, д. 31А, стр. 1"
    assert normalize_text(text) == "г Москв ул Полярн д 31А стр 1"


def test_tokens(tokenizer):
    assert tokenizer.tokens("Привет, world! foo_bar 42 —") == [
        "Привет",
        "world",
        "foo_bar",
        "42",
    ]


@pytest.mark.parametrize("text", ["", "   ", "!!! ... —"])
def test_normalize_without_tokens(tokenizer, text):
    assert tokenizer.normalize(text) == ""


def test_empty_stem_is_kept(tokenizer):
    # "и" is stemmed to an empty string and still takes its place
    assert tokenizer.normalize("кошки и собаки") == "кошк  собак"


def test_tokenize(tokenizer):
    assert list(tokenizer.tokenize("Вазы, кошки.")) == ["Ваз", "кошк"]


def test_normalize_mixed_tokens(tokenizer):
    # "ая" keeps its ending since RV is at the end, "ой" has no RV and loses it
    assert tokenizer.normalize("1-ая и 2-ой") == "1 ая  2 "


def test_default_stemmer_is_shared(tokenizer):
    assert tokenizer._stem is get_word_base
    assert Tokenizer()._stem is tokenizer._stem


def test_custom_stemmer():
    stemmer = Stemmer.Stemmer("russian")
    tokenizer = Tokenizer(stemmer.stemWord)
    text = "Летом мы жили в маленьком доме на берегу реки."

    assert tokenizer.normalize(text) == " ".join(
        stemmer.stemWords(tokenizer.tokens(text))
    )


def test_invalid_text(tokenizer):
    with pytest.raises(InvalidTextError):
        tokenizer.normalize(None)

    with pytest.raises(TypeError):
        normalize_text(42)
