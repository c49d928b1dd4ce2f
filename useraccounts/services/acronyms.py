"""Access to the acronyms owned by users."""

from typing import List

from .. import domain
from . import util
from .models import DBAcronym


def get_acronyms(user_id: str) -> List[domain.Acronym]:
    """
    Get the acronyms owned by a user.

    This does not look at the owner at all, so it behaves the same for active
    and soft-deleted owners, and returns an empty list for a user with no
    acronyms.
    """
    with util.transaction() as session:
        return [_to_domain(db_acronym) for db_acronym
                in session.query(DBAcronym)
                .filter(DBAcronym.user_id == user_id)
                .order_by(DBAcronym.acronym_id)
                .all()]


def add_acronym(acronym: domain.Acronym) -> domain.Acronym:
    """Store a new acronym."""
    with util.transaction() as session:
        db_acronym = DBAcronym(short=acronym.short, long=acronym.long,
                               user_id=acronym.user_id)
        session.add(db_acronym)
        session.commit()
        return _to_domain(db_acronym)


def _to_domain(db_acronym: DBAcronym) -> domain.Acronym:
    return domain.Acronym(acronym_id=db_acronym.acronym_id,
                          short=db_acronym.short, long=db_acronym.long,
                          user_id=db_acronym.user_id)
