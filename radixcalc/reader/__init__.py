from radixcalc.reader.lexer import tokenize, Tokenizer
from radixcalc.reader.token import Token, UnaryOp, BinaryOp, NumberBase, PRECEDENCE

__all__ = ["tokenize", "Tokenizer", "Token", "UnaryOp", "BinaryOp", "NumberBase", "PRECEDENCE"]
