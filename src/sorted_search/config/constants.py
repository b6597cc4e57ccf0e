"""Application-wide constants."""

# Returned by binary_search when no element is order-equivalent to the target.
# Distinct from every valid index.
NOT_FOUND = -1

# Comparator names understood by get_comparator() and the CLI
SUPPORTED_COMPARATORS = ("casefold", "numeric", "string")

DEFAULT_COMPARATOR = "numeric"


def parse_comparator_name(name: str) -> str:
    """Normalise and validate a comparator name.

    Accepts any casing and surrounding whitespace, so ``" Numeric "``
    yields ``"numeric"``.

    Args:
        name: Comparator name as typed by the user or read from settings.

    Returns:
        The normalised comparator name.

    Raises:
        ValueError: If the name is empty or not in ``SUPPORTED_COMPARATORS``.
    """
    normalised = name.strip().lower()

    if not normalised:
        raise ValueError(
            f"Empty comparator name. Supported: {', '.join(SUPPORTED_COMPARATORS)}"
        )

    if normalised not in SUPPORTED_COMPARATORS:
        raise ValueError(
            f"Unsupported comparator: {name.strip()}. "
            f"Supported: {', '.join(SUPPORTED_COMPARATORS)}"
        )

    return normalised
