from mlisp.reader.tokenizer import tokenize
from mlisp.reader.parser import TokenStream, parse, parse_all, parse_token
from mlisp.reader.term_reader import read_terms, read_terms_from_string

__all__ = [
    "tokenize",
    "TokenStream",
    "parse",
    "parse_all",
    "parse_token",
    "read_terms",
    "read_terms_from_string",
]
