"""Description filter applied while rendering the gist list."""

import logging

logger = logging.getLogger(__name__)


def matches(description: object, filter_text: str) -> bool:
    """
    Check whether a gist description contains the filter text.

    Matching is a case-insensitive substring test and an empty filter
    matches everything. A missing description counts as an empty string;
    so does a non-string one, which is logged.
    """
    if filter_text == "":
        return True

    if description is None:
        description = ""
    elif not isinstance(description, str):
        logger.warning(
            f"Expected description as string but got: {type(description).__name__}"
        )
        description = ""

    return filter_text.lower() in description.lower()
