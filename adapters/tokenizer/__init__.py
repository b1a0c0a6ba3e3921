from .regex_tokenizer import RegexTokenizer, TokenStream, tokenize

__all__ = [
    "RegexTokenizer",
    "TokenStream",
    "tokenize",
]
