"""Bit-reversed reordering of interleaved complex 16-bit data."""


def _reverse_bits(value, width):
    if width == 0:
        return 0
    return int(format(value, f"0{width}b")[::-1], 2)


def complex_bit_reverse(data, stages):
    """Return data with its complex pairs moved to bit-reversed positions.

    data holds [re, im, re, im, ...] with at least 2 ** stages pairs; any
    values past those pairs are kept in place. The input is not modified.
    """
    if stages < 0:
        raise ValueError("stages must not be negative")
    n = 1 << stages
    if len(data) < 2 * n:
        raise ValueError("data holds fewer than 2 ** stages complex values")
    reordered = [
        value
        for m in range(n)
        for value in data[2 * _reverse_bits(m, stages):2 * _reverse_bits(m, stages) + 2]
    ]
    return reordered + list(data[2 * n:])