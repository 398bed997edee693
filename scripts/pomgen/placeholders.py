"""Placeholder tokens in POM templates and their substitution.

A template marks a value to be filled in by making a token the sole text of
an element, e.g. ``<java.version>JAVA_PRODUCT_VERSION</java.version>``.
"""

from typing import Optional

from .pom_document import find_elements_with_text

JAVA_PRODUCT_VERSION_PLACEHOLDER = "JAVA_PRODUCT_VERSION"
ASPECTJ_PLUGIN_VERSION_PLACEHOLDER = "ASPECTJ_PLUGIN_VERSION"
ASCIIDOCLET_PLUGIN_VERSION_PLACEHOLDER = "ASCIIDOCLET_PLUGIN_VERSION"

# The AspectJ plugin version does not vary with the target Java version:
# 1.8 is used for Java 6, 7 and 8 alike.
ASPECTJ_PLUGIN_VERSION = "1.8"
ASCIIDOCLET_PLUGIN_VERSION = "1.5.4"


def placeholder_values(java_version: str) -> dict:
    """Return the token → replacement table for one POM."""
    return {
        JAVA_PRODUCT_VERSION_PLACEHOLDER: java_version,
        ASPECTJ_PLUGIN_VERSION_PLACEHOLDER: ASPECTJ_PLUGIN_VERSION,
        ASCIIDOCLET_PLUGIN_VERSION_PLACEHOLDER: ASCIIDOCLET_PLUGIN_VERSION,
    }


def substitute_placeholders(root, java_version: Optional[str]) -> int:
    """Replace every placeholder token found as an element's entire text.

    Elements where the token is only part of the text are left alone. A
    template without tokens is not an error.

    Args:
        root: Root element of the POM tree; modified in place.
        java_version: Target Java version, substituted verbatim.

    Returns:
        The number of elements rewritten.
    """
    replaced = 0
    for token, value in placeholder_values(java_version).items():
        for el in find_elements_with_text(root, token):
            el.text = value
            # text split around a comment lives in the comment's tail
            for comment in el:
                comment.tail = None
            replaced += 1
    return replaced
