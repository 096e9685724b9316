from xlisp.reader.parser import lex, TokenStream, read_string
