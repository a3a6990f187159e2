import hashlib

# Ring size
RING_BITS = 8
RING_SIZE = 2 ** RING_BITS # m-bit identifier space

# Value stored by insert_key when the caller does not supply one
DEFAULT_VALUE = -1


def in_interval(x: int, a: int, b: int, inclusive: bool = False) -> bool:
    """
    Check if x is in the circular interval (a, b) on the identifier space.

    With inclusive=True the interval is (a, b]. When a == b the interval
    covers the whole ring, so a single node owns everything.
    """
    if a < b:
        if inclusive:
            return a < x <= b
        return a < x < b
    elif a > b:
        # Wraparound case
        if inclusive:
            return x > a or x <= b
        return x > a or x < b
    else:
        return True


def finger_start(node_id: int, i: int) -> int:
    """Calculate the start of the i-th finger interval of node_id."""
    return (node_id + 2 ** i) % RING_SIZE


def validate_identifier(value: int, what: str = "identifier") -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{what} must be an integer, got {value!r}")
    if not 0 <= value < RING_SIZE:
        raise ValueError(f"{what} {value} is outside [0, {RING_SIZE})")
    return value


def hash_key(key: str) -> int:
    """Hash a key to an integer in the Chord identifier space."""
    sha1 = hashlib.sha1(key.encode('utf-8'))
    # Convert the SHA-1 hash to an integer in the range [0, RING_SIZE)
    return int(sha1.hexdigest(), 16) % RING_SIZE
