"""Core boolean expression machinery: AST, tokenizer, parser, evaluator, truth tables."""
