# src/gedcom_tree/tags.py

"""
GEDCOM tag vocabulary the parser and linker care about.

Every other tag is treated as an opaque key.
"""

from __future__ import annotations

from typing import Optional

ROOT_TAG = "ROOT"

INDIVIDUAL_TAG = "INDI"
FAMILY_TAG = "FAM"

HUSBAND_TAG = "HUSB"
WIFE_TAG = "WIFE"
CHILD_TAG = "CHIL"

NAME_TAG = "NAME"
BIRTH_TAG = "BIRT"
DEATH_TAG = "DEAT"
PLACE_TAG = "PLAC"
SEX_TAG = "SEX"

CONC_TAG = "CONC"
CONT_TAG = "CONT"

PARENT_ROLES = (HUSBAND_TAG, WIFE_TAG)
OFFSPRING_ROLES = (CHILD_TAG,)


def is_reference(token: Optional[str]) -> bool:
    """True for tokens of the form ``@IDENT@``."""
    if not token:
        return False
    return token.startswith("@") and token.endswith("@")


def is_individual(tag: Optional[str]) -> bool:
    return tag == INDIVIDUAL_TAG
