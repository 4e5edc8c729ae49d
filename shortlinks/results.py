"""Outcome values returned by the link shortener service."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Union

from .database.models import Link


@dataclass
class Accepted:
    """The link was stored."""

    link: Link
    accepted = True


@dataclass
class RejectedInvalid:
    """The submitted link failed validation."""

    link: Link
    field_errors: Dict[str, str] = field(default_factory=dict)
    accepted = False


@dataclass
class RejectedDuplicateUrl:
    """The URL is already shortened under another abbreviation."""

    link: Link
    existing_abbreviation: str
    field_errors: Dict[str, str] = field(default_factory=dict)
    accepted = False


@dataclass
class RejectedAbbreviationTaken:
    """Another link already uses the abbreviation."""

    link: Link
    message: str = "The short link already exists. Try another one."
    accepted = False


RegistrationResult = Union[Accepted, RejectedInvalid, RejectedDuplicateUrl, RejectedAbbreviationTaken]


@dataclass(frozen=True)
class ToUrl:
    url: str


@dataclass(frozen=True)
class ToHome:
    pass


RedirectTarget = Union[ToUrl, ToHome]


class DeleteResult(Enum):
    DELETED = "deleted"
    NOT_FOUND = "not_found"
