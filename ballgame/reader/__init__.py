from ballgame.reader.parser import lex, read_expr, TokenStream

__all__ = ["lex", "read_expr", "TokenStream"]
