import secrets
from string import ascii_lowercase
from string import digits

DIGITS = digits + ascii_lowercase


def random_id(length: int = 8) -> str:
    """A short base-36 identifier for generators and events."""
    number = secrets.randbelow(len(DIGITS) ** length)
    places = []
    for _ in range(length):
        number, place = divmod(number, len(DIGITS))
        places.append(DIGITS[place])
    return "".join(reversed(places))
