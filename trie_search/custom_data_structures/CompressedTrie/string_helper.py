"""String helpers used by the compressed trie."""


def longest_common_prefix(one: str, two: str) -> str:
    """Return the longest common prefix of two strings.

    Args:
        one (str): The first string.
        two (str): The second string.

    Returns:
        str: The longest leading part shared by `one` and `two`,
        or "" if they share nothing.

    """
    if one == two:
        return one

    size = 0
    for char_one, char_two in zip(one, two):
        if char_one != char_two:
            break
        size += 1
    return one[:size]
