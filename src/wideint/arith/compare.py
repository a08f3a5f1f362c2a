from wideint.core.limbs import Limbs


def compare(lhs: Limbs, rhs: Limbs) -> int:
    """Return -1, 0 or 1 as ``lhs`` is below, equal to or above ``rhs``."""
    if lhs.sign != rhs.sign:
        return -1 if lhs.is_negative() else 1
    if lhs.size() != rhs.size():
        longer = 1 if lhs.size() > rhs.size() else -1
        # A longer negative value has more magnitude.
        return -longer if lhs.is_negative() else longer
    for i in reversed(range(lhs.size())):
        if lhs.digits[i] != rhs.digits[i]:
            return -1 if lhs.digits[i] < rhs.digits[i] else 1
    return 0
