"""
Naming utilities for code generation.

Table and column names are turned into exported identifiers by
capitalizing their first character and nothing else.
"""


def capitalize_initial(name: str) -> str:
    """
    Upper-case the first character of a name, leaving the rest untouched.

    No keyword avoidance or character cleanup is done, so a name starting
    with a digit stays an invalid identifier.

    Args:
        name: Raw table or column name

    Returns:
        The name with its first character upper-cased ("" for "")
    """
    if not name:
        return ""
    return name[:1].upper() + name[1:]
