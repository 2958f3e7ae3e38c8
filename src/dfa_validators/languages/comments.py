"""
Block comments over the alphabet {a, *, /}.

Comments are delimited by "/*" and "*/" and do not nest, so the first "*/"
closes the comment.
"""
from enum import Enum

from dfa_validators.dfa import Specification

ANY = Specification.WILDCARD
COMMENT_ALPHABET = frozenset("a*/")


class Single(Enum):
    INIT = "init"
    SLASH = "slash"
    IN_COMMENT = "in-comment"
    END_ASTERISK = "end-asterisk"
    VALID = "valid"
    INVALID = "invalid"


SINGLE_TRANSITIONS = {
    Single.INIT:         {'/': Single.SLASH, ANY: Single.INVALID},
    Single.SLASH:        {'*': Single.IN_COMMENT, ANY: Single.INVALID},
    Single.IN_COMMENT:   {'*': Single.END_ASTERISK, ANY: Single.IN_COMMENT},
    Single.END_ASTERISK: {'/': Single.VALID, 'a': Single.IN_COMMENT, '*': Single.END_ASTERISK},
    # anything after the closing delimiter
    Single.VALID:        {ANY: Single.INVALID},
    Single.INVALID:      {ANY: Single.INVALID},
}


def block_comment() -> Specification:
    return Specification(SINGLE_TRANSITIONS, Single.INIT,
                         accept_states={Single.VALID},
                         alphabet=COMMENT_ALPHABET,
                         symbols=COMMENT_ALPHABET,
                         name="block-comment",
                         description="exactly one block comment /* ... */ over {a, *, /}")


class Embedded(Enum):
    VALID = "valid"
    SLASH = "slash"
    IN_COMMENT = "in-comment"
    END_ASTERISK = "end-asterisk"


EMBEDDED_TRANSITIONS = {
    Embedded.VALID:        {'/': Embedded.SLASH, ANY: Embedded.VALID},
    Embedded.SLASH:        {'*': Embedded.IN_COMMENT, 'a': Embedded.VALID, '/': Embedded.SLASH},
    Embedded.IN_COMMENT:   {'*': Embedded.END_ASTERISK, ANY: Embedded.IN_COMMENT},
    Embedded.END_ASTERISK: {'/': Embedded.VALID, 'a': Embedded.IN_COMMENT, '*': Embedded.END_ASTERISK},
}


def contains_block_comment() -> Specification:
    return Specification(EMBEDDED_TRANSITIONS, Embedded.VALID,
                         accept_states={Embedded.VALID},
                         alphabet=COMMENT_ALPHABET,
                         symbols=COMMENT_ALPHABET,
                         name="contains-block-comment",
                         description="no block comment, or only well-formed block comments, over {a, *, /}")
