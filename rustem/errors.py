class InvalidWordError(TypeError):
    """Errors raised by RussianStemmer.stem and get_word_base for non-string words."""


class InvalidTextError(TypeError):
    """Errors raised by Tokenizer and normalize_text for non-string texts."""
