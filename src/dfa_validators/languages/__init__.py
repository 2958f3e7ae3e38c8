"""
Catalog of the built-in languages, each a `Specification` built from its transition table.
"""
from typing import Callable, Dict, List

from dfa_validators.dfa import Specification
from dfa_validators.exceptions import UnknownLanguageError
from dfa_validators.languages.comments import block_comment, contains_block_comment
from dfa_validators.languages.identifiers import java_identifier
from dfa_validators.languages.names import name_minus_one
from dfa_validators.languages.numbers import floating_point
from dfa_validators.languages.student_ids import student_id, student_id_inverse, student_id_space
from dfa_validators.languages.suffixes import last_three_a
from dfa_validators.languages.zeros import not_three_zeros, three_zeros

BUILDERS: List[Callable[[], Specification]] = [
    three_zeros,
    not_three_zeros,
    java_identifier,
    floating_point,
    student_id,
    student_id_inverse,
    student_id_space,
    name_minus_one,
    last_three_a,
    block_comment,
    contains_block_comment,
]


def build_catalog() -> Dict[str, Specification]:
    catalog = {}
    for builder in BUILDERS:
        spec = builder()
        assert spec.name not in catalog, f"duplicate language name {spec.name}"
        catalog[spec.name] = spec
    return catalog


CATALOG: Dict[str, Specification] = build_catalog()


def available_languages() -> List[str]:
    return list(CATALOG)


def get_specification(name: str) -> Specification:
    try:
        return CATALOG[name]
    except KeyError:
        raise UnknownLanguageError(name, CATALOG) from None
