"""Element-wise shifting, scaling and mixing of fixed-point vectors."""

from splkit.fixed import sat_w32_to_w16, wrap_int16, wrap_int32


def _paired(first, second):
    if len(first) != len(second):
        raise ValueError("vectors must have the same length")
    return zip(first, second)


def vector_bit_shift_w16(vector, right_shifts):
    """Shift 16-bit values right (positive) or left (negative), wrapping to 16 bits."""
    if right_shifts > 0:
        return [wrap_int16(v >> right_shifts) for v in vector]
    factor = 1 << -right_shifts
    return [wrap_int16(v * factor) for v in vector]


def vector_bit_shift_w32(vector, right_shifts):
    """Shift 32-bit values right (positive) or left (negative), wrapping to 32 bits."""
    if right_shifts > 0:
        return [wrap_int32(v >> right_shifts) for v in vector]
    return [wrap_int32(v << -right_shifts) for v in vector]


def vector_bit_shift_w32_to_w16(vector, right_shifts):
    """Shift 32-bit values and saturate the results into 16 bits."""
    if right_shifts >= 0:
        return [sat_w32_to_w16(v >> right_shifts) for v in vector]
    left_shifts = -right_shifts
    return [sat_w32_to_w16(wrap_int32(v << left_shifts)) for v in vector]


def scale_vector(vector, gain, right_shifts):
    """Compute (gain * v) >> right_shifts for each value, wrapping to 16 bits."""
    return [wrap_int16((v * gain) >> right_shifts) for v in vector]


def scale_vector_with_sat(vector, gain, right_shifts):
    """Compute (gain * v) >> right_shifts for each value, saturating to 16 bits."""
    return [sat_w32_to_w16((v * gain) >> right_shifts) for v in vector]


def scale_and_add_vectors(in1, gain1, shift1, in2, gain2, shift2):
    """Compute ((gain1 * a) >> shift1) + ((gain2 * b) >> shift2) element-wise."""
    return [
        wrap_int16(
            wrap_int16((gain1 * a) >> shift1) + wrap_int16((gain2 * b) >> shift2)
        )
        for a, b in _paired(in1, in2)
    ]


def scale_and_add_vectors_with_round(in1, scale1, in2, scale2, right_shifts):
    """Compute (scale1 * a + scale2 * b + round) >> right_shifts element-wise.

    The rounding term is half of 1 << right_shifts. Raises ValueError for
    empty vectors or a negative shift.
    """
    if len(in1) == 0 or len(in2) == 0:
        raise ValueError("vectors must not be empty")
    if right_shifts < 0:
        raise ValueError("right_shifts must not be negative")
    round_value = (1 << right_shifts) >> 1
    return [
        wrap_int16(wrap_int32(a * scale1 + b * scale2 + round_value) >> right_shifts)
        for a, b in _paired(in1, in2)
    ]