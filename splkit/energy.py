"""Signal energy with automatic scaling against 32-bit overflow."""

from splkit.fixed import get_size_in_bits, norm_w32, wrap_int16, wrap_int32


def get_scaling_square(vector, times):
    """Right shifts needed so that `times` summed squares fit in 32 bits."""
    nbits = get_size_in_bits(times)
    # Negating -32768 wraps in 16 bits, which leaves that sample out of the maximum.
    smax = max([-1, *(v if v > 0 else wrap_int16(-v) for v in vector)])
    if smax == 0:
        return 0
    t = norm_w32(wrap_int32(smax * smax))
    return 0 if t > nbits else nbits - t


def energy(vector):
    """Return (energy, scale_factor); energy << scale_factor approximates the sum of squares."""
    scaling = get_scaling_square(vector, len(vector))
    total = sum((v * v) >> scaling for v in vector)
    return wrap_int32(total), scaling