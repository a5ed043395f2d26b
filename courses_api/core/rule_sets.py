"""Rule Sets — the declared field rules for User and Course payloads.

Invariants:
    - Declaration order is the order violations are reported in
    - Keys are the camelCase names clients send (firstName, userId, ...)
    - Course create and update share one rule set
"""

from courses_api.core.domain_types import Presence
from courses_api.core.field_validation import (
    Check, FieldRule, is_alpha, is_email, is_non_negative_int, is_string,
)


USER_RULES: tuple[FieldRule, ...] = (
    FieldRule(
        "firstName", Presence.REQUIRED,
        "You must provide a first name for the user using the key firstName",
        (Check(is_alpha, "firstName must be a string, with only alpha characters"),),
    ),
    FieldRule(
        "lastName", Presence.REQUIRED,
        "You must provide a last name for the user using the key lastName",
        (Check(is_alpha, "lastName must be a string, with only alpha characters"),),
    ),
    FieldRule(
        "emailAddress", Presence.REQUIRED,
        "You must provide an email address for the user using the key emailAddress",
        (Check(is_email, "You must provide a valid email address"),),
    ),
    FieldRule(
        "password", Presence.REQUIRED,
        "You must provide a password for the user using the key password",
        (Check(is_string, "The password must be a string"),),
    ),
)


COURSE_RULES: tuple[FieldRule, ...] = (
    FieldRule(
        "title", Presence.REQUIRED,
        "You must provide a title for the course with the key title",
        (Check(is_string, "The title must be a string"),),
    ),
    FieldRule(
        "description", Presence.REQUIRED,
        "You must provide a description for the course with the key description",
        (Check(is_string, "The description must be a string"),),
    ),
    FieldRule(
        "estimatedTime", Presence.IF_PRESENT,
        checks=(Check(
            is_string,
            "If you provide information for estimatedTime, it should be in string format",
        ),),
    ),
    FieldRule(
        "materialsNeeded", Presence.IF_PRESENT,
        checks=(Check(
            is_string,
            "If you provide information about the materialsNeeded, it should be in string format",
        ),),
    ),
    FieldRule(
        "userId", Presence.REQUIRED,
        "You must provide the id of the user this course belongs to with the key userId",
        (Check(is_non_negative_int, "You must provide a valid userId"),),
    ),
)
