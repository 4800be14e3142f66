"""Masking helpers for writing ID card numbers to logs."""


def mask_id_card(id_card: object) -> str:
    """Mask an ID card number: show the first 6 and last 4 characters.

    Anything that is not a string of at least 10 characters is fully masked,
    so malformed input never leaks into logs either.

    Examples:
        >>> mask_id_card("110101199003077758")
        '110101********7758'
        >>> mask_id_card("12345")
        '*****'
    """
    if not isinstance(id_card, str):
        return f"<{type(id_card).__name__}>"
    if len(id_card) >= 10:
        return f"{id_card[:6]}{'*' * (len(id_card) - 10)}{id_card[-4:]}"
    return "*" * len(id_card)
