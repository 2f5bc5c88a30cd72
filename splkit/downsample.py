"""FIR filtering combined with decimation in Q12."""

from splkit.fixed import sat_w32_to_w16, wrap_int32


def downsample_fast(data_in, data_out_length, coefficients, factor, delay):
    """Filter data_in with Q12 coefficients and keep every factor-th sample.

    Output k is taken at input position delay + k * factor. The filter reads
    len(coefficients) - 1 samples of history before that position, so
    data_in must begin with that history and delay must cover it. Raises
    ValueError when the arguments cannot produce data_out_length samples.
    """
    if data_out_length <= 0 or len(coefficients) == 0:
        raise ValueError("output length and coefficients must not be empty")
    if factor < 1:
        raise ValueError("factor must be positive")
    order = len(coefficients) - 1
    if delay < order:
        raise ValueError("delay must be at least len(coefficients) - 1")
    endpos = delay + factor * (data_out_length - 1) + 1
    if len(data_in) < endpos:
        raise ValueError("data_in is too short")

    def filtered(position):
        acc = 2048 + sum(c * data_in[position - j] for j, c in enumerate(coefficients))
        return sat_w32_to_w16(wrap_int32(acc) >> 12)

    return [filtered(position) for position in range(delay, endpos, factor)]