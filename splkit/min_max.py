"""Minimum, maximum and arg-extremum operations on 16- and 32-bit vectors."""

from operator import itemgetter

from splkit.fixed import INT16_MAX, INT32_MAX


def _require_nonempty(vector):
    if len(vector) == 0:
        raise ValueError("vector must not be empty")


def max_abs_value_w16(vector):
    """Largest absolute value, limited to 32767."""
    _require_nonempty(vector)
    return min(max(abs(v) for v in vector), INT16_MAX)


def max_abs_value_w32(vector):
    """Largest absolute value, limited to 0x7FFFFFFF."""
    _require_nonempty(vector)
    return min(max(abs(v) for v in vector), INT32_MAX)


def max_value_w16(vector):
    """Largest value of a 16-bit vector."""
    _require_nonempty(vector)
    return max(vector)


def max_value_w32(vector):
    """Largest value of a 32-bit vector."""
    _require_nonempty(vector)
    return max(vector)


def min_value_w16(vector):
    """Smallest value of a 16-bit vector."""
    _require_nonempty(vector)
    return min(vector)


def min_value_w32(vector):
    """Smallest value of a 32-bit vector."""
    _require_nonempty(vector)
    return min(vector)


def max_abs_index_w16(vector):
    """Index of the first largest absolute value; -32768 outranks 32767."""
    _require_nonempty(vector)
    return max(enumerate(vector), key=lambda item: abs(item[1]))[0]


def _first_max_index(vector):
    _require_nonempty(vector)
    return max(enumerate(vector), key=itemgetter(1))[0]


def _first_min_index(vector):
    _require_nonempty(vector)
    return min(enumerate(vector), key=itemgetter(1))[0]


def max_index_w16(vector):
    """Index of the first maximum of a 16-bit vector."""
    return _first_max_index(vector)


def max_index_w32(vector):
    """Index of the first maximum of a 32-bit vector."""
    return _first_max_index(vector)


def min_index_w16(vector):
    """Index of the first minimum of a 16-bit vector."""
    return _first_min_index(vector)


def min_index_w32(vector):
    """Index of the first minimum of a 32-bit vector."""
    return _first_min_index(vector)