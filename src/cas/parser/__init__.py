from cas.parser.parser import parse_cas
from cas.parser.tokenizer import RawBlock, State, tokenize

__all__ = ["parse_cas", "tokenize", "RawBlock", "State"]
