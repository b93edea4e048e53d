"""
SDOC core: lexer, parser, IR and project configuration.
"""
